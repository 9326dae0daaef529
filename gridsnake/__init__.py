# Grid Snake Source Package
"""
Grid Snake - Single-player snake on a wrapping or walled grid.

Modules:
- core: Abstract interfaces for the game state machine and renderers
- game: Snake rules, food placement, high score storage, input, rendering and session loop
- utils: Configuration loading
- visualization: Terminal (rich) output
"""

__version__ = "1.0.0"
