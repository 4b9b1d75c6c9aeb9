from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer

from coverage2lcov._meta import __version__, logger
from coverage2lcov.cli.errors import EXIT_DATAERR, EXIT_GENERIC, EXIT_OK
from coverage2lcov.config import LOG_FORMAT
from coverage2lcov.coverage.parse import iter_file_coverage
from coverage2lcov.errors import CoverageFileError, MalformedSectionError
from coverage2lcov.io import read_lines, write_output
from coverage2lcov.render.lcov import render_records

_MISSING_ARGUMENT = "missing command argument, a coverage file is required."


def _configure_runtime(*, quiet: bool, verbose: bool) -> None:
    """Configure logging based on *quiet*/*verbose*."""
    level = logging.ERROR if quiet else (logging.DEBUG if verbose else logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _version_callback(value: bool) -> None:  # noqa: FBT001
    if value:
        typer.echo(f"coverage2lcov {__version__}")
        raise typer.Exit(code=EXIT_OK)


def convert(
    coverage_file: Annotated[
        Path | None,
        typer.Argument(
            help="coverage.py text report ('coverage report -m' output). Use '-' for stdin.",
            show_default=False,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the tracefile to PATH (use '-' for stdout)."),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail on unreadable 'Missing' columns instead of skipping the row."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Emit diagnostic logging."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress warnings, emit only errors."),
    ] = False,
    version: Annotated[  # noqa: ARG001
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
) -> None:
    """Convert a coverage.py text report into an lcov tracefile."""
    _configure_runtime(quiet=quiet, verbose=verbose)

    if coverage_file is None:
        typer.echo(f"ERROR: {_MISSING_ARGUMENT}", err=True)
        raise typer.Exit(code=EXIT_GENERIC)

    try:
        lines = read_lines(coverage_file)
        text = render_records(iter_file_coverage(lines, strict=strict))
    except CoverageFileError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_GENERIC) from exc
    except MalformedSectionError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        if exc.line is not None:
            typer.echo(f"  in row: {exc.line!r}", err=True)
        raise typer.Exit(code=EXIT_DATAERR) from exc

    logger.debug("converted %s", coverage_file)
    write_output(text, output)
    raise typer.Exit(code=EXIT_OK)


def register(app: typer.Typer) -> None:
    app.command("convert")(convert)


__all__ = ["convert", "register"]
