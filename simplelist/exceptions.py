"""Custom exception hierarchy for simplelist.

The list, scroll and expansion state are total over their inputs and never
raise. Errors only come from the edges: configuration values and the CLI.

Exception Hierarchy:
    SimplelistError (base)
    └── ConfigurationError - Settings/configuration issues

Usage:
    from simplelist.exceptions import ConfigurationError

    raise ConfigurationError("Unknown theme", setting="theme", value="neon")
"""

from typing import Any, Optional


class SimplelistError(Exception):
    """Base exception for all simplelist errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., setting names)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigurationError(SimplelistError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
