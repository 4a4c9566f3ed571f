"""Shared utility functions for pgx-new.

Provides the Rich console used for all user-facing output, a handful of
coloured message helpers, and the small file-system primitives the scaffolder
builds on.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The resolved ``Path`` object.

    Raises:
        FileExistsError: If *path* exists and is not a directory.
        NotADirectoryError: If a parent segment of *path* is a regular file.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path.resolve()


def write_bytes(path: str | Path, data: bytes) -> Path:
    """Write *data* to *path*, truncating any existing file.

    Parent directories are NOT created; a missing parent surfaces as
    ``FileNotFoundError``.
    """
    file_path = Path(path)
    with open(file_path, "wb") as fh:
        fh.write(data)
    return file_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.  Both are printed literally (no markup).
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def print_step(message: str) -> None:
    """Print a dimmed progress line."""
    console.print(f"  [dim]{message}[/dim]")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")
