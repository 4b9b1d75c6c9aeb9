"""Convert coverage.py text reports into lcov tracefiles."""

from coverage2lcov._meta import __version__, logger
from coverage2lcov.coverage.parse import iter_file_coverage, parse_line, parse_sections
from coverage2lcov.errors import Coverage2LcovError, CoverageFileError, MalformedSectionError
from coverage2lcov.model import FileCoverage, MissedSection
from coverage2lcov.render.lcov import render_record, render_records

__all__ = [
    "Coverage2LcovError",
    "CoverageFileError",
    "FileCoverage",
    "MalformedSectionError",
    "MissedSection",
    "__version__",
    "iter_file_coverage",
    "logger",
    "parse_line",
    "parse_sections",
    "render_record",
    "render_records",
]
