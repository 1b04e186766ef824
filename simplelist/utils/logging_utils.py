"""Logging setup for simplelist.

Modules use the standard pattern:

    import logging
    logger = logging.getLogger(__name__)

and the application configures handlers once at startup. While the TUI owns
the terminal, log records go to a rotating file in the config directory
instead of stderr.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from ..config.constants import SIMPLELIST_CONFIG_DIR

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_log_path(log_dir: Optional[Path] = None) -> Path:
    """Return the TUI log file path, creating its directory."""
    log_dir = log_dir or SIMPLELIST_CONFIG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "tui.log"


def setup_tui_logging(verbose: bool = False, log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Set up file logging for a TUI session.

    The root logger is set to WARNING to avoid noise from third-party libs.
    simplelist's own loggers are set to INFO, or DEBUG when verbose.

    Returns:
        The package logger
    """
    package_logger = logging.getLogger("simplelist")
    try:
        log_file = get_log_path(log_dir)

        root = logging.getLogger()
        if not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
            handler = RotatingFileHandler(
                log_file, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
            )
            handler.setFormatter(logging.Formatter(_LOG_FORMAT))
            root.addHandler(handler)
            root.setLevel(logging.WARNING)
    except OSError as e:
        # We can't log this failure since logging is what's failing
        import sys

        print(f"Warning: TUI logging setup failed: {e}", file=sys.stderr)

    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return package_logger
