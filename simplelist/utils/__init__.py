"""Utility helpers for simplelist."""
