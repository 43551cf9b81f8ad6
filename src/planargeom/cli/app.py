"""CLI application entry point for planargeom.

This module provides the main CLI interface using Typer. Coordinates are
passed as "x,y" strings; put "--" before the vertex list when the first
vertex has a negative x.
"""

from pathlib import Path
from typing import Annotated, Any

import typer

from planargeom import __version__
from planargeom.cli.output import (
    SYM_DOT,
    console,
    format_vector,
    print_containment,
    print_error,
    print_header,
    print_hits,
    print_measurements,
    print_step,
)
from planargeom.config import LoggingConfig, PlanarGeomSettings
from planargeom.core import Polygon, PolygonalChain
from planargeom.domain import Vector
from planargeom.exceptions import ConfigError, PlanarGeomError
from planargeom.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="planargeom",
    help="Measure polygons and polygonal chains and test point containment.",
    add_completion=False,
    no_args_is_help=True,
)

_state: dict[str, Any] = {"quiet": False, "logger": None}

COORDINATE_HINT = (
    "Coordinates are written as x,y (for example 0.5,-1). "
    "Put -- before the vertex list when the first x is negative."
)


def parse_coordinate(text: str) -> Vector:
    """Parse an "x,y" string into a vector.

    Raises:
        ConfigError: If the text is not two comma-separated numbers
    """
    parts = text.split(",")
    if len(parts) != 2:
        raise ConfigError(
            f"Invalid coordinate '{text}': expected 'x,y'", details=COORDINATE_HINT
        )
    try:
        return Vector(float(parts[0]), float(parts[1]))
    except ValueError as e:
        raise ConfigError(
            f"Invalid coordinate '{text}': {e}", details=COORDINATE_HINT
        ) from e


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]planargeom[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
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
    """Planar geometry queries from the command line."""
    settings = PlanarGeomSettings(
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )
    _state["logger"] = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    _state["quiet"] = quiet


@app.command()
def polygon(
    vertices: Annotated[
        list[str],
        typer.Argument(
            help="Polygon vertices as x,y (at least 3)",
            show_default=False,
        ),
    ],
    points: Annotated[
        list[str] | None,
        typer.Option(
            "--point",
            "-p",
            help="Point to classify as inside/outside (repeatable)",
        ),
    ] = None,
) -> None:
    """Measure a simple polygon and classify probe points.

    Example:
        planargeom polygon 0,0 1,0 1,1 0,1 --point 0.5,0.3
    """
    quiet = _state["quiet"]
    logger = _state["logger"]
    try:
        shape = Polygon(parse_coordinate(v) for v in vertices)
        probes = [parse_coordinate(p) for p in points or []]
        if shape.number_of_vertices() < 3:
            raise ConfigError(
                f"A polygon needs at least 3 vertices, got {shape.number_of_vertices()}",
                details="Pass the boundary vertices in order, for example 0,0 1,0 0,1.",
            )

        if not quiet:
            print_header(__version__)
            print_step("Polygon")
        print_measurements(
            [
                ("Vertices", str(shape.number_of_vertices())),
                ("Perimeter", f"{shape.perimeter():.6g}"),
                ("Signed area", f"{shape.signed_area():.6g}"),
                ("Area", f"{shape.area():.6g}"),
                ("Center", format_vector(shape.center())),
            ]
        )

        inside_count = 0
        if probes:
            if not quiet:
                print_step("Containment")
            for probe in probes:
                inside = shape.is_inside(probe)
                inside_count += inside
                print_containment(probe, inside)

    except ConfigError as e:
        logger.info("Polygon input rejected", error=str(e))
        print_error(str(e), details=e.details)
        raise typer.Exit(code=1)
    except PlanarGeomError as e:
        logger.error("Polygon command failed", error=str(e), kind=type(e).__name__)
        print_error(str(e))
        raise typer.Exit(code=1)

    logger.info(
        "Polygon measured",
        vertices=shape.number_of_vertices(),
        area=shape.area(),
        points=len(probes),
        inside=inside_count,
    )


@app.command()
def chain(
    vertices: Annotated[
        list[str],
        typer.Argument(
            help="Chain vertices as x,y (at least 2)",
            show_default=False,
        ),
    ],
) -> None:
    """Measure an open polygonal chain and list its self-intersections.

    Example:
        planargeom chain 0,0 1,1 1,0 0,1
    """
    quiet = _state["quiet"]
    logger = _state["logger"]
    try:
        path = PolygonalChain(parse_coordinate(v) for v in vertices)
        if path.number_of_vertices() < 2:
            raise ConfigError(
                f"A chain needs at least 2 vertices, got {path.number_of_vertices()}",
                details="Pass the chain vertices in order, for example 0,0 1,1.",
            )

        crossings = path.find_self_intersections()

        if not quiet:
            print_header(__version__)
            print_step("Chain")
        print_measurements(
            [
                ("Vertices", str(path.number_of_vertices())),
                ("Length", f"{path.length():.6g}"),
                ("Displacement", format_vector(path.displacement())),
                (
                    "Self-intersections",
                    f"{crossings.number_of_hits()} {SYM_DOT} "
                    + ("simple" if not crossings.has_hit() else "self-crossing"),
                ),
            ]
        )
        if crossings.has_hit():
            print_hits(crossings, "Self-intersections")

    except ConfigError as e:
        logger.info("Chain input rejected", error=str(e))
        print_error(str(e), details=e.details)
        raise typer.Exit(code=1)
    except PlanarGeomError as e:
        logger.error("Chain command failed", error=str(e), kind=type(e).__name__)
        print_error(str(e))
        raise typer.Exit(code=1)

    logger.info(
        "Chain measured",
        vertices=path.number_of_vertices(),
        length=path.length(),
        self_intersections=crossings.number_of_hits(),
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
