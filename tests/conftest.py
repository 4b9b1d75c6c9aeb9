from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def fixture_report() -> Path:
    """Path to the bundled ``coverage report -m`` sample."""
    return FIXTURES / "test.coverage"


@pytest.fixture
def report_file(tmp_path: Path) -> Callable[..., Path]:
    def write(rows: list[str], *, filename: str = "report.txt") -> Path:
        path = tmp_path / filename
        path.write_text("\n".join(rows) + "\n", encoding="utf-8")
        return path

    return write
