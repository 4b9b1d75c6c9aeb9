from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from coverage2lcov.errors import MalformedSectionError

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True)
class MissedSection:
    """Inclusive [start, end] span of missed lines (1-indexed line numbers)."""

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate that the range boundaries are sane."""
        label = f"{self.start}-{self.end}"
        if self.start < 1 or self.end < 1:
            raise MalformedSectionError(label, reason="line numbers must be >= 1")
        if self.end < self.start:
            raise MalformedSectionError(label, reason="end must be >= start")

    @classmethod
    def single(cls, line: int) -> MissedSection:
        return cls(line, line)

    def lines(self) -> Iterator[int]:
        yield from range(self.start, self.end + 1)

    def __len__(self) -> int:
        return self.end - self.start + 1

    def __str__(self) -> str:
        return f"{self.start}" if self.start == self.end else f"{self.start}-{self.end}"


@dataclass(frozen=True, slots=True)
class FileCoverage:
    """One row of a coverage.py text report.

    ``"src/lib/config.py   45   11   76%   37-45, 60, 73"`` becomes::

        FileCoverage(
            file="src/lib/config.py",
            stmt_count=45,
            miss_count=11,
            covered_percent=76,
            missed_sections=(MissedSection(37, 45), MissedSection(60, 60), MissedSection(73, 73)),
        )

    ``missed_sections`` keeps the order of the report; ranges are never merged or sorted.
    """

    file: str
    stmt_count: int
    miss_count: int
    covered_percent: int
    missed_sections: tuple[MissedSection, ...] = ()

    def __post_init__(self) -> None:
        """Validate that counts are non-negative."""
        if self.stmt_count < 0:
            msg = "FileCoverage.stmt_count must be >= 0"
            raise ValueError(msg)
        if self.miss_count < 0:
            msg = "FileCoverage.miss_count must be >= 0"
            raise ValueError(msg)
        if self.covered_percent < 0:
            msg = "FileCoverage.covered_percent must be >= 0"
            raise ValueError(msg)

    def missed_lines(self) -> Iterator[int]:
        for section in self.missed_sections:
            yield from section.lines()

    @property
    def missed_line_count(self) -> int:
        return sum(len(section) for section in self.missed_sections)


__all__ = ["FileCoverage", "MissedSection"]
