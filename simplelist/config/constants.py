"""
Centralized constants for simplelist.

Defaults and fixed strings used by the list state and the TUI live here so
they can be tuned in one place.
"""

import os
from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

CONFIG_DIR_ENV_VAR = "SIMPLELIST_CONFIG_DIR"

SIMPLELIST_CONFIG_DIR = Path(
    os.environ.get(CONFIG_DIR_ENV_VAR, str(Path.home() / ".config" / "simplelist"))
)

# =============================================================================
# LIST DEFAULTS
# =============================================================================

DEFAULT_SAMPLE_SIZE = 10  # Rows in the demo list
MAX_SAMPLE_SIZE = 10_000

# Seconds for the animated scroll back to the first row
DEFAULT_SCROLL_DURATION = 0.4

# Delay between steps of the headless scroll animator
DEFAULT_SCROLL_STEP_DELAY = 0.01

# =============================================================================
# CONTENT
# =============================================================================

# Every demo row points at the same remote image
DEFAULT_IMAGE_REF = "https://mlove.3vozrast.ru/media/images/polls/748/tb_poll.jpg"

WELCOME_TEXT = "Welcome to my App!"
CONTINUE_LABEL = "Continue"
UP_LABEL = "↑ Up"

DETAIL_TEXT = (
    "Vestibulum ante ipsum primis in faucibus orci luctus et ultrices posuere "
    "cubilia curae; Maecenas rutrum finibus sem, in gravida tellus sollicitudin "
    "vitae. Etiam leo metus, gravida eget nisl ac, volutpat suscipit urna."
)

# =============================================================================
# THEMES
# =============================================================================

DEFAULT_THEME = "simplelist-dark"
