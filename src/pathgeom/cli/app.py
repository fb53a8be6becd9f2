"""CLI application entry point for pathgeom.

This module provides the main CLI interface using Typer.
"""

import os
from pathlib import Path
from typing import Annotated

import typer

from pathgeom import __version__
from pathgeom.cli.output import (
    console,
    create_progress,
    print_cancellation_summary,
    print_error,
    print_font_info,
    print_header,
    print_processing_info,
    print_step,
    print_success,
)
from pathgeom.config import (
    FlattenConfig,
    HolePredicateKind,
    LoggingConfig,
    OutputFormat,
    PathGeomSettings,
    ProcessingConfig,
    ReaderConfig,
)
from pathgeom.core import FontConverter, PathGeometryReader, hole_predicate_for
from pathgeom.domain import FillRule
from pathgeom.exceptions import FontLoadError, PathGeomError
from pathgeom.io import FontReader, dumps, parse_svg_path, write_feature_collection
from pathgeom.utils import ConversionStats, configure_console_logging, configure_logging

# Create the Typer app
app = typer.Typer(
    name="pathgeom",
    help="Convert vector paths and font glyphs into polygons, lines and points.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]pathgeom[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
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
    """Convert vector paths and font glyphs into planar geometry."""
    logging_config = LoggingConfig(log_file=log_file, log_level=log_level.upper())
    if log_file is not None:
        configure_logging(
            log_file=log_file,
            console_level=logging_config.log_level,
            file_level=logging_config.file_log_level,
            quiet=quiet,
        )
    else:
        configure_console_logging(logging_config.log_level)

    ctx.obj = {"quiet": quiet, "logging": logging_config}


@app.command()
def path(
    data: Annotated[
        str,
        typer.Argument(
            help="SVG path data, e.g. 'M 0 0 L 10 0 L 10 10 Z'",
            show_default=False,
        ),
    ],
    fill_rule: Annotated[
        FillRule,
        typer.Option(
            "--fill-rule",
            "-r",
            help="Fill rule used to resolve overlapping rings",
        ),
    ] = FillRule.EVEN_ODD,
    stroked: Annotated[
        bool,
        typer.Option(
            "--stroked",
            help="Treat subpaths as unfilled outlines (closed subpaths become lines)",
        ),
    ] = False,
    flatten: Annotated[
        float | None,
        typer.Option(
            "--flatten",
            "-f",
            help="Flatten curves with this tolerance (required for curved paths)",
            min=0.001,
            max=10.0,
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            help="Output format",
        ),
    ] = OutputFormat.WKT,
    precision: Annotated[
        int,
        typer.Option(
            "--precision",
            "-p",
            help="Decimal places for WKT output",
            min=0,
            max=17,
        ),
    ] = 6,
    holes: Annotated[
        HolePredicateKind,
        typer.Option(
            "--holes",
            help="How rings following a shell are recognized as its holes",
        ),
    ] = HolePredicateKind.ORIENTATION,
) -> None:
    """Convert SVG path data into WKT or GeoJSON.

    Example:
        pathgeom path "M 0 0 L 0 10 L 10 10 L 10 0 Z"

    Screen Y grows downward and geometry Y grows upward, so the square
    comes out below the X axis.
    """
    reader_config = ReaderConfig(filled=not stroked, hole_predicate=holes)

    try:
        source = parse_svg_path(data, fill_rule=fill_rule, filled=reader_config.filled)
        reader = PathGeometryReader(
            hole_predicate=hole_predicate_for(reader_config.hole_predicate)
        )
        if flatten is not None:
            geometry = reader.read_flattened(source, FlattenConfig(tolerance=flatten).tolerance)
        else:
            geometry = reader.read(source)
    except PathGeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    typer.echo(dumps(geometry, output_format, precision))


@app.command()
def glyphs(
    ctx: typer.Context,
    input_font: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF/OTF font file",
            show_default=False,
        ),
    ],
    glyph: Annotated[
        list[str] | None,
        typer.Option(
            "--glyph",
            "-g",
            help="Glyph to convert (repeatable; default: all glyphs)",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}.geojson)",
        ),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto)",
            min=1,
        ),
    ] = None,
    flatten: Annotated[
        float,
        typer.Option(
            "--flatten",
            "-f",
            help="Curve flattening tolerance in font units",
            min=0.001,
            max=10.0,
        ),
    ] = 0.25,
    holes: Annotated[
        HolePredicateKind,
        typer.Option(
            "--holes",
            help="How rings following a shell are recognized as its holes",
        ),
    ] = HolePredicateKind.ORIENTATION,
) -> None:
    """Convert font glyphs into a GeoJSON FeatureCollection.

    Each glyph becomes one feature named after the glyph. Outlines are
    flattened, then resolved with the non-zero fill rule.

    Example:
        pathgeom glyphs Roboto-Regular.ttf -g A -g B

    This will create Roboto-Regular.geojson with the outlines of A and B.
    """
    options = ctx.obj or {}
    quiet = options.get("quiet", False)

    if not input_font.exists():
        print_error(
            f"Input file not found: {input_font}",
            details=f"The file '{input_font}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_font.is_file():
        print_error(
            f"Input path is not a file: {input_font}",
            details="Please provide a path to a TTF or OTF font file.",
        )
        raise typer.Exit(code=1)

    settings = PathGeomSettings(
        reader=ReaderConfig(hole_predicate=holes),
        flatten=FlattenConfig(tolerance=flatten),
        processing=ProcessingConfig(max_workers=workers),
        logging=options.get("logging", LoggingConfig()),
    )
    output_path = output if output is not None else input_font.with_suffix(".geojson")

    if not quiet:
        print_header(__version__)

    try:
        if not quiet:
            print_step("Loading font")

        try:
            with FontReader(input_font) as reader:
                font_type = reader.format
                upm = reader.units_per_em
                glyph_count = len(glyph) if glyph else len(reader.glyph_names)
        except Exception as e:
            raise FontLoadError(str(input_font), str(e)) from e

        if not quiet:
            print_font_info(
                font_path=str(input_font),
                font_type=font_type,
                glyph_count=glyph_count,
                upm=upm,
            )
            print_step("Converting")
            print_processing_info(workers or os.cpu_count() or 1, is_auto=(workers is None))

        converter = FontConverter(settings)
        try:
            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task("Converting glyphs", total=glyph_count)

                    def update_progress(completed: int, total: int, *_: object) -> None:
                        progress.update(task_id, completed=completed, total=total)

                    geometries, stats = converter.convert(
                        font_path=input_font,
                        glyph_names=glyph,
                        max_workers=workers,
                        progress_callback=update_progress,
                    )
            else:
                geometries, stats = converter.convert(
                    font_path=input_font,
                    glyph_names=glyph,
                    max_workers=workers,
                )
        except KeyboardInterrupt:
            if not quiet:
                print_cancellation_summary(converted=0)
            raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

        write_feature_collection(output_path, geometries)

        if not quiet:
            _print_summary(output_path, stats)

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except PathGeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _print_summary(output_path: Path, stats: ConversionStats) -> None:
    print_success(
        output_path=str(output_path),
        total_time_s=stats.duration_seconds,
        converted=stats.converted_count,
        polygons=stats.polygons,
        degenerate=stats.degenerate_clusters,
        errors=stats.error_count,
        avg_time_ms=stats.avg_path_time_ms,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
