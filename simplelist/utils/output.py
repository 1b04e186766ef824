"""Shared console output utilities."""

from rich.console import Console

# Shared console instance for all CLI output
console = Console()

# Errors go to stderr so they never mix with command output
error_console = Console(stderr=True)
