"""
simplelist UI Configuration.

Handles persistence of UI preferences: theme, demo list size and the
scroll-to-top animation duration.
Config is stored in ~/.config/simplelist/ui_config.json
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..exceptions import ConfigurationError
from .constants import (
    DEFAULT_SAMPLE_SIZE,
    DEFAULT_SCROLL_DURATION,
    DEFAULT_THEME,
    MAX_SAMPLE_SIZE,
    SIMPLELIST_CONFIG_DIR,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "theme": DEFAULT_THEME,
    "sample_size": DEFAULT_SAMPLE_SIZE,
    "scroll_duration": DEFAULT_SCROLL_DURATION,
}


def get_ui_config_path() -> Path:
    """
    Get path to UI config file.

    Returns:
        Path to ~/.config/simplelist/ui_config.json
    """
    SIMPLELIST_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return SIMPLELIST_CONFIG_DIR / "ui_config.json"


def load_ui_config() -> dict[str, Any]:
    """
    Load UI configuration from file.

    Returns:
        Config dict, or defaults if file doesn't exist or is invalid
    """
    path = get_ui_config_path()
    if path.exists():
        try:
            config = json.loads(path.read_text())
            if not isinstance(config, dict):
                logger.warning("Ignoring malformed UI config at %s", path)
                return DEFAULT_CONFIG.copy()
            # Merge with defaults to handle missing keys
            return {**DEFAULT_CONFIG, **config}
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Failed to read UI config %s: %s", path, e)
            return DEFAULT_CONFIG.copy()
    return DEFAULT_CONFIG.copy()


def save_ui_config(config: dict[str, Any]) -> None:
    """
    Save UI configuration to file.

    Args:
        config: Configuration dict to save
    """
    path = get_ui_config_path()
    try:
        path.write_text(json.dumps(config, indent=2) + "\n")
    except OSError as e:
        # Non-critical, the session keeps working with in-memory values
        logger.warning("Failed to save UI config %s: %s", path, e)


def get_theme() -> str:
    """Get current theme name from config."""
    return str(load_ui_config().get("theme", DEFAULT_THEME))


def set_theme(theme_name: str) -> None:
    """Set and persist theme preference."""
    config = load_ui_config()
    config["theme"] = theme_name
    save_ui_config(config)


def get_sample_size() -> int:
    """
    Get the number of demo rows to show.

    Raises:
        ConfigurationError: If the stored value is not an integer in range
    """
    raw = load_ui_config().get("sample_size", DEFAULT_SAMPLE_SIZE)
    return validate_sample_size(raw)


def validate_sample_size(value: Any) -> int:
    """Check a demo list size and return it as an int."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            "sample_size must be an integer", setting="sample_size", value=value
        )
    if not 0 <= value <= MAX_SAMPLE_SIZE:
        raise ConfigurationError(
            f"sample_size must be between 0 and {MAX_SAMPLE_SIZE}",
            setting="sample_size",
            value=value,
        )
    return value


def get_scroll_duration() -> float:
    """
    Get the scroll-to-top animation duration in seconds.

    Raises:
        ConfigurationError: If the stored value is not a non-negative number
    """
    raw = load_ui_config().get("scroll_duration", DEFAULT_SCROLL_DURATION)
    if isinstance(raw, bool) or not isinstance(raw, (int, float)) or raw < 0:
        raise ConfigurationError(
            "scroll_duration must be a non-negative number",
            setting="scroll_duration",
            value=raw,
        )
    return float(raw)
