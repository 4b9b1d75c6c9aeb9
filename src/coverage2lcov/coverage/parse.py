from __future__ import annotations

from typing import TYPE_CHECKING

from coverage2lcov._meta import logger
from coverage2lcov.config import PERCENT_MARK, RANGE_SEP, SECTION_SEP, SUMMARY_FIELDS
from coverage2lcov.errors import MalformedSectionError
from coverage2lcov.model import FileCoverage, MissedSection

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


def _is_count(token: str) -> bool:
    return token.isascii() and token.isdigit()


def _split_summary(text: str) -> tuple[str, int, int, int] | None:
    """Split ``"<file>  <stmts>  <miss>  <cover>"`` from the right.

    The file keeps its inner whitespace; the last three fields must be counts.
    """
    tokens = text.rsplit(maxsplit=SUMMARY_FIELDS - 1)
    if len(tokens) != SUMMARY_FIELDS:
        return None
    file, stmts, miss, cover = tokens
    file = file.strip()
    if not file or not all(_is_count(t) for t in (stmts, miss, cover)):
        return None
    return file, int(stmts), int(miss), int(cover)


def _parse_line_number(token: str, part: str) -> int:
    part = part.strip()
    if not _is_count(part):
        raise MalformedSectionError(token, reason=f"{part!r} is not a line number")
    return int(part)


def _parse_section(token: str) -> MissedSection:
    """Parse ``"12"`` or ``"12-15"`` into an inclusive section."""
    bounds = token.strip().split(RANGE_SEP)
    if len(bounds) == 1:
        return MissedSection.single(_parse_line_number(token, bounds[0]))
    if len(bounds) == 2:  # noqa: PLR2004
        start, end = (_parse_line_number(token, b) for b in bounds)
        return MissedSection(start, end)
    raise MalformedSectionError(token, reason="expected 'N' or 'START-END'")


def parse_sections(text: str | None) -> tuple[MissedSection, ...]:
    """Parse the "Missing" column: ``'5-13, 20, 22'`` -> three sections.

    A blank column means nothing was missed.
    """
    if not text or not text.strip():
        return ()
    return tuple(_parse_section(token) for token in text.split(SECTION_SEP))


def parse_line(line: str) -> FileCoverage | None:
    """Parse one report row into a :class:`FileCoverage`.

    Returns ``None`` for rows that are not per-file coverage data (headers,
    separators, blank lines). Raises :class:`MalformedSectionError` when the
    row is coverage data but its "Missing" column cannot be read.
    """
    line = line.rstrip("\r\n")
    parts = line.split(PERCENT_MARK)
    if len(parts) < 2:  # noqa: PLR2004
        return None

    summary = _split_summary(parts[0])
    if summary is None:
        return None
    file, stmt_count, miss_count, covered_percent = summary

    try:
        sections = parse_sections(parts[1])
    except MalformedSectionError as exc:
        raise MalformedSectionError(exc.token, line=line, reason=exc.reason) from exc

    return FileCoverage(
        file=file,
        stmt_count=stmt_count,
        miss_count=miss_count,
        covered_percent=covered_percent,
        missed_sections=sections,
    )


def iter_file_coverage(lines: Iterable[str], *, strict: bool = False) -> Iterator[FileCoverage]:
    """Yield a record for every coverage row in *lines*, in order.

    Rows with an unreadable "Missing" column are skipped with a warning, or
    re-raised when *strict* is set.
    """
    for lineno, line in enumerate(lines, start=1):
        try:
            record = parse_line(line)
        except MalformedSectionError as exc:
            if strict:
                raise
            logger.warning("line %d: skipping row with %s", lineno, exc)
            continue
        if record is None:
            logger.debug("line %d: not a coverage row, skipped", lineno)
            continue
        yield record


__all__ = [
    "iter_file_coverage",
    "parse_line",
    "parse_sections",
]
