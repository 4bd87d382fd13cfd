"""Utility helpers shared across davdrop."""
