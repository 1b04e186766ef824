"""Textual user interface for simplelist."""
