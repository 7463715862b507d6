"""Rich console output helpers for the CLI.

Everything the ``convert`` command prints goes through this module: the
banner, the stitch settings, the stitch plan table and the final status.
"""


from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console()

SYM_STEP = "▸"
SYM_OK = "✓"
SYM_ERR = "✗"


def print_header(version: str) -> None:
    """Print the application banner."""
    console.print(f"\n[bold]Threadpath[/bold] [dim]v{version}[/dim]")


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n[cyan]{SYM_STEP}[/cyan] {message}")


def print_input_info(input_path: str, mode: str, pitch: float) -> None:
    """Print the input drawing and the stitch settings used for it.

    Args:
        input_path: Path to the input drawing
        mode: Shape interpretation mode
        pitch: Stitch pitch in millimetres
    """
    # Text keeps brackets in paths from being read as markup
    line = Text("  ")
    line.append(input_path, style="bold")
    line.append(f"  {mode} mode, {pitch:g} mm pitch", style="dim")
    console.print(line)


def print_design_summary(
    segments: int,
    stitches: int,
    shapes: int,
    skipped: int,
    jump_before: float,
    jump_after: float,
    jump_saving: float = 0.0,
) -> None:
    """Print the stitch plan as a two-column table.

    Args:
        segments: Number of stitch segments
        stitches: Number of stitch points
        shapes: Number of shapes or wires stitched
        skipped: Number of shapes or wires skipped
        jump_before: Jump distance in input order (mm)
        jump_after: Jump distance after optimization (mm)
        jump_saving: Fraction of the jump distance removed
    """
    table = Table.grid(padding=(0, 2))
    table.add_column(style="dim", justify="right")
    table.add_column()

    table.add_row("shapes", f"{shapes} stitched, {skipped} skipped")
    table.add_row("segments", str(segments))
    table.add_row("stitches", f"{stitches:,}")
    if jump_after < jump_before:
        table.add_row(
            "jumps",
            f"{jump_before:.1f} mm → [green]{jump_after:.1f} mm[/green] ({jump_saving:.0%} less)",
        )
    else:
        table.add_row("jumps", f"{jump_after:.1f} mm")

    console.print(table)


def print_success(output_path: str, file_size: str, total_time_s: float, errors: int) -> None:
    """Print the written file and the run time.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total processing time in seconds
        errors: Number of shapes that failed
    """
    if total_time_s < 1:
        elapsed = f"{total_time_s * 1000:.0f}ms"
    else:
        elapsed = f"{total_time_s:.1f}s"

    console.print(f"\n[bold green]{SYM_OK} Written[/bold green] in {elapsed}")
    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})", style="dim")
    console.print(line)

    if errors:
        console.print(f"  [yellow]{errors} shapes could not be stitched[/yellow]")


def print_dry_run_complete() -> None:
    """Print dry run completion message."""
    console.print(f"\n[bold green]{SYM_OK} Dry run[/bold green] [dim]no file written[/dim]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR}[/bold red] {message}", highlight=False)
    if details:
        console.print(f"  [dim]{details}[/dim]", highlight=False)
