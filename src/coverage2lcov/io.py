from __future__ import annotations

from pathlib import Path

import click

from coverage2lcov.errors import CoverageFileError

STDIO = Path("-")


def read_lines(source: Path) -> list[str]:
    """Read the coverage report at *source* (``'-'`` for stdin) as lines."""
    try:
        if source == STDIO:
            return click.get_binary_stream("stdin").read().decode("utf-8").splitlines()
        return source.read_text(encoding="utf-8").splitlines()
    except UnicodeDecodeError as exc:
        raise CoverageFileError(str(source), reason="not valid UTF-8 text") from exc
    except OSError as exc:
        raise CoverageFileError(str(source), reason=exc.strerror) from exc


def write_output(text: str, destination: Path | None) -> None:
    """Write output to stdout or a file (PATH or '-' for stdout)."""
    if destination is None or destination == STDIO:
        print(text, end="")
        return
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text, encoding="utf-8")


__all__ = ["STDIO", "read_lines", "write_output"]
