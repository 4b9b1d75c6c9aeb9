from __future__ import annotations

import pytest

from coverage2lcov.errors import MalformedSectionError
from coverage2lcov.model import FileCoverage, MissedSection


def test_missed_section_lines_and_len() -> None:
    sec = MissedSection(5, 13)
    assert list(sec.lines()) == list(range(5, 14))
    assert len(sec) == 9
    assert str(sec) == "5-13"


def test_missed_section_single() -> None:
    sec = MissedSection.single(60)
    assert sec == MissedSection(60, 60)
    assert list(sec.lines()) == [60]
    assert str(sec) == "60"


@pytest.mark.parametrize(("start", "end"), [(0, 3), (3, 0), (-1, 2), (10, 4)])
def test_missed_section_rejects_bad_bounds(start: int, end: int) -> None:
    with pytest.raises(MalformedSectionError):
        MissedSection(start, end)


def test_malformed_section_error_is_value_error() -> None:
    with pytest.raises(ValueError, match="end must be >= start"):
        MissedSection(9, 2)


def test_file_coverage_missed_lines_keep_section_order() -> None:
    fc = FileCoverage(
        file="pkg/mod.py",
        stmt_count=40,
        miss_count=6,
        covered_percent=85,
        missed_sections=(MissedSection(30, 32), MissedSection(4, 4), MissedSection(31, 32)),
    )
    assert list(fc.missed_lines()) == [30, 31, 32, 4, 31, 32]
    assert fc.missed_line_count == 6


def test_file_coverage_is_immutable() -> None:
    fc = FileCoverage(file="a.py", stmt_count=1, miss_count=0, covered_percent=100)
    with pytest.raises(AttributeError):
        fc.file = "b.py"  # type: ignore[misc]


def test_file_coverage_rejects_negative_counts() -> None:
    with pytest.raises(ValueError, match="stmt_count"):
        FileCoverage(file="a.py", stmt_count=-1, miss_count=0, covered_percent=100)
    with pytest.raises(ValueError, match="miss_count"):
        FileCoverage(file="a.py", stmt_count=1, miss_count=-1, covered_percent=100)
    with pytest.raises(ValueError, match="covered_percent"):
        FileCoverage(file="a.py", stmt_count=1, miss_count=0, covered_percent=-1)
