"""CLI application entry point for threadpath.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from threadpath import __version__
from threadpath.cli.output import (
    console,
    print_design_summary,
    print_dry_run_complete,
    print_error,
    print_header,
    print_input_info,
    print_step,
    print_success,
)
from threadpath.config import (
    InputConfig,
    InputMode,
    LoggingConfig,
    OptimizerConfig,
    PatternConfig,
    SamplerConfig,
    ThreadpathSettings,
)
from threadpath.core import StitchProcessor
from threadpath.exceptions import (
    EmptyDesignError,
    InputError,
    ThreadpathError,
    WriteError,
)
from threadpath.io import writable_extensions

# Create the Typer app
app = typer.Typer(
    name="threadpath",
    help="Convert SVG drawings and Fritzing PCB wiring into embroidery stitch files.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Threadpath[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def convert(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Input drawing (.svg) or Fritzing sketch (.fz, .fzz)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path,
        typer.Argument(
            help="Output embroidery file (.pes, .dst, .exp, .jef, ...)",
            show_default=False,
        ),
    ],
    mode: Annotated[
        str,
        typer.Option(
            "--mode",
            "-m",
            help="Shape interpretation mode (normal|fritzing09)",
        ),
    ] = "normal",
    pitch: Annotated[
        float,
        typer.Option(
            "--pitch",
            "-p",
            help="Stitch pitch in mm",
            min=0.1,
            max=12.7,
        ),
    ] = 2.0,
    star_size: Annotated[
        float,
        typer.Option(
            "--star-size",
            help="Junction star diameter in mm",
            min=0.1,
            max=10.0,
        ),
    ] = 2.0,
    no_optimize: Annotated[
        bool,
        typer.Option(
            "--no-optimize",
            help="Keep segments in input order",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Build the stitch plan and show it without writing a file",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert a vector drawing into an embroidery machine file.

    Every stroked path is sampled into stitches at a constant pitch, and all
    stitch segments are reordered into one path with short jumps.

    Example:
        threadpath board.svg board.pes --mode fritzing09
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_file.exists():
        print_error(
            f"Input file not found: {input_file}",
            details=f"The file '{input_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_file.is_file():
        print_error(
            f"Input path is not a file: {input_file}",
            details="Please provide a path to an SVG or Fritzing file.",
        )
        raise typer.Exit(code=1)

    try:
        input_mode = InputMode(mode.lower())
    except ValueError:
        print_error(
            f"Invalid mode: {mode}",
            details="Valid values: normal, fritzing09",
        )
        raise typer.Exit(code=1)

    extension = output.suffix.lstrip(".").lower()
    if not dry_run and extension not in writable_extensions():
        print_error(
            f"Unsupported output format: {output.suffix or output.name}",
            details="Valid extensions: " + ", ".join(sorted(writable_extensions())),
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = ThreadpathSettings(
        sampler=SamplerConfig(line_pitch=pitch),
        pattern=PatternConfig(star_size=star_size),
        input=InputConfig(mode=input_mode),
        optimizer=OptimizerConfig(enabled=not no_optimize),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else log_level,
        ),
    )

    try:
        if not quiet:
            print_step("Building stitches")
            print_input_info(str(input_file), input_mode.value, pitch)

        processor = StitchProcessor(settings, quiet=quiet)
        stats = processor.process(input_file, output, dry_run=dry_run)

        if not quiet:
            print_step("Stitch plan")
            print_design_summary(
                segments=stats.segments,
                stitches=stats.stitches,
                shapes=stats.shapes_processed,
                skipped=stats.shapes_skipped,
                jump_before=stats.jump_distance_before,
                jump_after=stats.jump_distance_after,
                jump_saving=stats.jump_saving,
            )
            if dry_run:
                print_dry_run_complete()
            else:
                print_success(
                    output_path=str(output),
                    file_size=_format_file_size(output),
                    total_time_s=stats.duration_seconds,
                    errors=len(stats.errors),
                )

    except EmptyDesignError as e:
        print_error(str(e), details="No visible stroked path or routed wire was found.")
        raise typer.Exit(code=1)
    except InputError as e:
        print_error(f"Could not read input: {e}")
        raise typer.Exit(code=1)
    except WriteError as e:
        print_error(f"Could not write output: {e.reason}")
        raise typer.Exit(code=1)
    except ThreadpathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "12 KB")
    """
    try:
        size_bytes = path.stat().st_size
        if size_bytes < 1024:
            return f"{size_bytes} B"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.0f} KB"
        else:
            return f"{size_bytes / (1024 * 1024):.1f} MB"
    except OSError:
        return "unknown"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
