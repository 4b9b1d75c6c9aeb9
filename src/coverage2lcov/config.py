"""Central configuration and constants for ``coverage2lcov``."""

from __future__ import annotations

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"

# Column separators of a coverage.py text report row.
PERCENT_MARK = "%"
SECTION_SEP = ","
RANGE_SEP = "-"

# "<file>  <stmts>  <miss>  <cover>" - everything before the percent sign.
SUMMARY_FIELDS = 4

# lcov tracefile markers.
LCOV_SOURCE_FILE = "SF:"
LCOV_LINE_DATA = "DA:"
LCOV_END_OF_RECORD = "end_of_record"

# Hit count reported for every missed line.
MISSED_HITS = 0


__all__ = [
    "LCOV_END_OF_RECORD",
    "LCOV_LINE_DATA",
    "LCOV_SOURCE_FILE",
    "LOG_FORMAT",
    "MISSED_HITS",
    "PERCENT_MARK",
    "RANGE_SEP",
    "SECTION_SEP",
    "SUMMARY_FIELDS",
]
