"""lcov tracefile rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

from coverage2lcov.config import LCOV_END_OF_RECORD, LCOV_LINE_DATA, LCOV_SOURCE_FILE, MISSED_HITS

if TYPE_CHECKING:
    from collections.abc import Iterable

    from coverage2lcov.model import FileCoverage


def render_record(record: FileCoverage) -> str:
    """Render *record* as an lcov block.

    Only missed lines are known, so every ``DA`` entry has a zero hit count.
    The block ends with ``end_of_record`` and no trailing newline.
    """
    out = [f"{LCOV_SOURCE_FILE}{record.file}"]
    out.extend(f"{LCOV_LINE_DATA}{lnum},{MISSED_HITS}" for lnum in record.missed_lines())
    out.append(LCOV_END_OF_RECORD)
    return "\n".join(out)


def render_records(records: Iterable[FileCoverage]) -> str:
    """Render every record, each block followed by a newline."""
    return "".join(f"{render_record(record)}\n" for record in records)


__all__ = ["render_record", "render_records"]
