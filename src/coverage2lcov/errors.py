"""Centralised exception hierarchy for coverage2lcov."""

from __future__ import annotations


class Coverage2LcovError(Exception):
    """Base class for all custom coverage2lcov exceptions."""


class CoverageFileError(Coverage2LcovError):
    """Coverage report could not be opened, read or decoded."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        msg = f"error reading coverage file: {path}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
        self.path = path
        self.reason = reason


class MalformedSectionError(Coverage2LcovError, ValueError):
    """A missed-section token is not a line number or a ``start-end`` range."""

    def __init__(self, token: str, *, line: str | None = None, reason: str = "invalid range") -> None:
        super().__init__(f"malformed missed section {token!r}: {reason}")
        self.token = token
        self.line = line
        self.reason = reason


__all__ = [
    "Coverage2LcovError",
    "CoverageFileError",
    "MalformedSectionError",
]
