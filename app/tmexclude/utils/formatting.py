"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys
from pathlib import Path

from rich.console import Console

from tmexclude.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")


def format_size(size_bytes: int | None) -> str:
    """Format a byte count as a human-readable string.

    Args:
        size_bytes: Size in bytes, or None when unknown.

    Returns:
        String such as "512 B" or "1.5 GB", or "size unknown" for None.
    """
    if size_bytes is None:
        return "size unknown"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if abs(size) < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
        size /= 1024
    return f"{size:.1f} TB"


def format_path(path: str) -> str:
    """Format a path for display with ``~`` in place of the home directory.

    Bytes of the name that are not valid UTF-8 are shown as U+FFFD.

    Args:
        path: Absolute path.

    Returns:
        Tilde-prefixed path for paths under home, the path unchanged otherwise.
    """
    path = path.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
    try:
        relative = Path(path).relative_to(Path.home())
    except ValueError:
        return path
    return "~" if str(relative) == "." else f"~/{relative}"
