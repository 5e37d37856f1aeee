"""Failures raised while reading battle definition files."""
from __future__ import annotations

from pathlib import Path


class DataError(Exception):
    """Any problem with status effect, skill, monster or player definitions."""


class DataLoadError(DataError):
    """A definitions file is absent, unreadable or not JSON at all."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class DataValidationError(DataError):
    """A definition has a missing field, a wrong type or an out-of-range value."""


class DataReferenceError(DataError):
    """A definition names a skill or status effect id nobody defined."""
