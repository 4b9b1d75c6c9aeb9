"""Parsing of coverage.py text report rows."""

from .parse import iter_file_coverage, parse_line, parse_sections

__all__ = ["iter_file_coverage", "parse_line", "parse_sections"]
