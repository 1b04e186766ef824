"""
GUI command for simplelist - launches the Textual people list
"""

import logging
from typing import Optional

import typer

from simplelist.config.ui_config import (
    get_sample_size,
    get_scroll_duration,
    get_theme,
    validate_sample_size,
)
from simplelist.exceptions import ConfigurationError
from simplelist.models.person import sample_people
from simplelist.ui.themes import get_theme_names
from simplelist.utils.logging_utils import setup_tui_logging
from simplelist.utils.output import error_console

logger = logging.getLogger(__name__)


def gui(
    ctx: typer.Context,
    theme: Optional[str] = typer.Option(
        None,
        "--theme",
        "-t",
        help="Theme to use (simplelist-dark, simplelist-light)",
    ),
    count: Optional[int] = typer.Option(
        None, "--count", "-n", help="Number of demo people to list"
    ),
    skip_onboarding: bool = typer.Option(
        False, "--skip-onboarding", help="Start directly on the people list"
    ),
):
    """Onboarding splash and expandable people list in the terminal."""
    from simplelist.ui.app import SimpleListApp

    verbose = bool(ctx.obj and ctx.obj.get("verbose"))

    try:
        theme_name = theme or get_theme()
        if theme_name not in get_theme_names():
            raise ConfigurationError("Unknown theme", setting="theme", value=theme_name)
        size = validate_sample_size(count) if count is not None else get_sample_size()
        scroll_duration = get_scroll_duration()
    except ConfigurationError as e:
        error_console.print(f"❌ Error: {e}", style="red")
        raise typer.Exit(1) from e

    setup_tui_logging(verbose=verbose)
    app = SimpleListApp(
        sample_people(size),
        show_onboarding=not skip_onboarding,
        theme_name=theme_name,
        scroll_duration=scroll_duration,
    )

    try:
        app.run()
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.exception("TUI crashed")
        error_console.print(f"❌ Error: {e}", style="red")
        raise typer.Exit(1) from e
