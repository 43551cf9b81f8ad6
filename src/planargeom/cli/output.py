"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from planargeom.domain import HitRecord, Vector

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success / inside
SYM_ERR = "✗"  # Error / outside
SYM_DOT = "·"  # Separator/secondary info


def format_vector(vector: Vector, precision: int = 6) -> str:
    """Format a vector as "(x, y)" with trailing zeros stripped."""
    x = f"{vector.x:.{precision}f}".rstrip("0").rstrip(".")
    y = f"{vector.y:.{precision}f}".rstrip("0").rstrip(".")
    return f"({x or '0'}, {y or '0'})"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]planargeom[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_measurements(rows: list[tuple[str, str]]) -> None:
    """Print label/value pairs as a borderless table.

    Args:
        rows: (label, value) pairs in display order
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="dim")
    table.add_column()
    for label, value in rows:
        table.add_row(label, value)
    console.print(table)


def print_containment(point: Vector, inside: bool) -> None:
    """Print the containment verdict for one probe point."""
    line = Text("  ")
    line.append(format_vector(point))
    if inside:
        line.append(f"  {SYM_OK} inside", style="green")
    else:
        line.append(f"  {SYM_ERR} outside", style="red")
    console.print(line)


def print_hits(record: HitRecord, title: str) -> None:
    """Print the hits of a record as a table.

    Args:
        record: Hits to display
        title: Table title
    """
    if not record.has_hit():
        console.print(f"  No {title.lower()}")
        return

    table = Table(title=title, title_justify="left")
    table.add_column("#", justify="right")
    table.add_column("Position")
    table.add_column("Edge", justify="right")
    table.add_column("Other edge", justify="right")
    table.add_column("t", justify="right")
    table.add_column("s", justify="right")
    for k, hit in enumerate(record):
        table.add_row(
            str(k),
            format_vector(hit.position),
            str(hit.location.vertex),
            str(hit.location.face),
            f"{hit.this_parameter:.6g}",
            f"{hit.other_parameter:.6g}",
        )
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print an error message.

    Args:
        message: Main error message
        details: Optional additional details
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  [dim]{details}[/dim]")
