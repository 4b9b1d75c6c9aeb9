from __future__ import annotations

import typer
from typer.main import get_command

from coverage2lcov.cli.convert import register


def create_app() -> typer.Typer:
    app = typer.Typer(
        help="Convert coverage.py text reports into lcov tracefiles.",
        add_completion=False,
    )
    register(app)
    return app


def main() -> None:
    app = create_app()
    get_command(app)(prog_name="coverage2lcov")


# Click-compatible object for tooling that imports it
cli = get_command(create_app())

__all__ = ["cli", "create_app", "main"]
