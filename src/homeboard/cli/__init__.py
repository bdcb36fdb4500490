"""
Homeboard CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging

import typer
from rich.console import Console

from homeboard import __version__
from homeboard.cli import build, init_cmd, serve, status
from homeboard.core.config.env import load_layered_env
from homeboard.utils.project import get_project_root

app = typer.Typer(
    name="homeboard",
    help="Personal dashboard: music-idea calendar, reading and Anki widgets",
    no_args_is_help=True,
    add_completion=True,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    Homeboard - Personal Dashboard.

    Quick Start:
        homeboard init       # Scaffold homeboard.json and data files
        homeboard build      # Write the static site to dist/
        homeboard serve      # Serve the page and the widget APIs
        homeboard status     # Check Goodreads and AnkiConnect
    """
    # Load .env files early so credentials are visible to every command.
    # Precedence: OS env > project .env.local > .env > user .env
    load_layered_env(project_dir=get_project_root())

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    ctx.obj = {"debug": debug}


app.command(name="init")(init_cmd.init)
app.command(name="build")(build.build)
app.command(name="serve")(serve.serve)
app.command(name="status")(status.status)


@app.command()
def version() -> None:
    """Show homeboard version and exit."""
    console.print(f"homeboard version {__version__}")
    raise typer.Exit(0)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main"]
