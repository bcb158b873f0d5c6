"""Utility helpers for strongname."""
