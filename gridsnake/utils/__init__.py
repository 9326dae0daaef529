"""Utility helpers for Grid Snake."""
