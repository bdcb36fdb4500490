"""
Project root discovery utilities for homeboard.

The project root is the directory holding homeboard.json; a git checkout
without one also counts so `homeboard init` can be run at its top level.
"""

from pathlib import Path

# Markers that indicate a project root, in order of priority
PROJECT_ROOT_MARKERS = [
    "homeboard.json",
    ".git",
]


def find_project_root(start: Path | None = None) -> Path | None:
    """
    Find the project root directory by searching upward for marker files.

    Args:
        start: Directory to start searching from. Defaults to current working directory.

    Returns:
        Path to the project root directory, or None if not found.

    Example:
        >>> find_project_root(Path("/site/data"))
        PosixPath('/site')
    """
    if start is None:
        start = Path.cwd()

    current = start.resolve()
    for candidate in [current, *current.parents]:
        for marker in PROJECT_ROOT_MARKERS:
            if (candidate / marker).exists():
                return candidate

    return None


def get_project_root(start: Path | None = None) -> Path:
    """Project root, or the start directory when no marker is found."""
    if start is None:
        start = Path.cwd()
    return find_project_root(start) or start.resolve()
