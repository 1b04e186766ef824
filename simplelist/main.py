#!/usr/bin/env python3
"""
Main CLI entry point for simplelist
"""

import typer

from simplelist import __version__
from simplelist.ui.gui import gui
from simplelist.utils.output import console

app = typer.Typer(
    help="simplelist - onboarding splash and expandable people list",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    simplelist - onboarding splash and expandable people list

    [bold]Examples:[/bold]

    Launch the list:
        [cyan]simplelist gui[/cyan]

    Start on the list with 50 people:
        [cyan]simplelist gui --skip-onboarding --count 50[/cyan]
    """
    ctx.obj = {"verbose": verbose}


@app.command()
def version():
    """Show simplelist version"""
    console.print(f"simplelist version {__version__}")


app.command()(gui)


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
