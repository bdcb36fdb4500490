"""Helpers shared by CLI commands."""

import typer
from pydantic import ValidationError
from rich.console import Console

from homeboard.core.config.loader import get_project_config_path, load_config
from homeboard.core.config.models import HomeboardConfig
from homeboard.utils.project import get_project_root

err_console = Console(stderr=True)


def load_project_config() -> HomeboardConfig:
    """
    Load config for the project around the working directory.

    Also primes the process-wide cache the API dependencies read from.

    Raises:
        typer.Exit: If the merged config is invalid
    """
    project_root = get_project_root()
    try:
        return load_config(project_dir=project_root, use_cache=False)
    except ValidationError as e:
        err_console.print(
            f"[red]Error:[/red] Invalid configuration in "
            f"{get_project_config_path(project_root)}"
        )
        for error in e.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            err_console.print(f"  • {field}: {error['msg']}")
        raise typer.Exit(1)
