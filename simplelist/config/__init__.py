"""Configuration for simplelist."""
