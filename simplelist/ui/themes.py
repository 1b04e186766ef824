"""
simplelist TUI Theme Definitions.

Material-style palettes registered with Textual's theming system. Cards use
``$primary`` as their background, so both themes keep readable text on it.
"""

from typing import Any

from textual.theme import Theme

# =============================================================================
# Dark Theme (Default)
# =============================================================================

SIMPLELIST_DARK = Theme(
    name="simplelist-dark",
    primary="#6200EE",      # Purple 500 - cards, buttons
    secondary="#03DAC5",    # Teal - the Up button
    accent="#BB86FC",       # Purple 200 - focus highlight
    foreground="#FFFFFF",
    background="#121212",
    surface="#1E1E1E",
    panel="#2C2C2C",
    success="#4EBF71",
    warning="#FFA62B",
    error="#CF6679",
    dark=True,
)

# =============================================================================
# Light Theme
# =============================================================================

SIMPLELIST_LIGHT = Theme(
    name="simplelist-light",
    primary="#6200EE",
    secondary="#018786",
    accent="#3700B3",
    foreground="#1F1F1F",
    background="#FFFFFF",
    surface="#F5F5F5",
    panel="#EDE7F6",
    success="#1A7F37",
    warning="#9A6700",
    error="#B00020",
    dark=False,
)


SIMPLELIST_THEMES: dict[str, Theme] = {
    "simplelist-dark": SIMPLELIST_DARK,
    "simplelist-light": SIMPLELIST_LIGHT,
}

THEME_PAIRS: dict[str, str] = {
    "simplelist-dark": "simplelist-light",
    "simplelist-light": "simplelist-dark",
}


def register_all_themes(app: Any) -> None:
    """
    Register all custom themes with the app.

    Args:
        app: The Textual App instance
    """
    for theme in SIMPLELIST_THEMES.values():
        app.register_theme(theme)


def get_theme_names() -> list[str]:
    """Get list of all available theme names."""
    return list(SIMPLELIST_THEMES.keys())


def get_opposite_theme(theme_name: str) -> str:
    """Get the paired dark/light theme, or the dark theme as fallback."""
    return THEME_PAIRS.get(theme_name, "simplelist-dark")
