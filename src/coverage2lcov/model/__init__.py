"""Domain model for coverage2lcov (pure types; no IO)."""

from .records import FileCoverage, MissedSection

__all__ = [
    "FileCoverage",
    "MissedSection",
]
