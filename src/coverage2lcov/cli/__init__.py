"""Command line interface for coverage2lcov."""

from coverage2lcov.cli.errors import EXIT_DATAERR, EXIT_GENERIC, EXIT_OK
from coverage2lcov.cli.root import cli, create_app, main

__all__ = ["EXIT_DATAERR", "EXIT_GENERIC", "EXIT_OK", "cli", "create_app", "main"]
