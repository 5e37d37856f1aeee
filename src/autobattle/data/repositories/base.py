"""Shared lazy loading and field checks for the definition repositories."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Generic, List, TypeVar

from autobattle.data import paths
from autobattle.data.errors import DataValidationError
from autobattle.data.json_loader import read_definition_file

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """Typed records from one definitions file, read on first access.

    Subclasses turn the raw id -> object mapping into records in ``_build``.
    """

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._by_id: Dict[str, T] | None = None

    @property
    def file_path(self) -> Path:
        return paths.get_definitions_path(self._base_path) / self._filename

    def _build(self, raw: dict[str, object]) -> Dict[str, T]:
        raise NotImplementedError

    def _records(self) -> Dict[str, T]:
        if self._by_id is None:
            self._by_id = self._build(read_definition_file(self.file_path))
        return self._by_id

    def get(self, def_id: str) -> T:
        """Look up one record; unknown ids raise KeyError."""
        records = self._records()
        if def_id not in records:
            raise KeyError(def_id)
        return records[def_id]

    def all(self) -> List[T]:
        """Every record, ordered by id."""
        records = self._records()
        return [records[def_id] for def_id in sorted(records)]

    # -----------------------
    # Field validation
    # -----------------------
    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be an object.")
        return value

    @staticmethod
    def _assert_required(payload: dict[str, object], required: set[str], context: str) -> None:
        missing = required - payload.keys()
        if missing:
            raise DataValidationError(f"{context} missing fields: {sorted(missing)}")

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_int(value: object, context: str, *, minimum: int | None = None) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise DataValidationError(f"{context} must be an integer.")
        if minimum is not None and value < minimum:
            raise DataValidationError(f"{context} must be at least {minimum}.")
        return value

    @staticmethod
    def _require_float(value: object, context: str) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DataValidationError(f"{context} must be a number.")
        return float(value)

    @staticmethod
    def _require_bool(value: object, context: str) -> bool:
        if not isinstance(value, bool):
            raise DataValidationError(f"{context} must be a boolean.")
        return value

    @staticmethod
    def _require_str_list(value: object, context: str) -> List[str]:
        if value is None:
            return []
        if not isinstance(value, list):
            raise DataValidationError(f"{context} must be a list.")
        result: List[str] = []
        for entry in value:
            if not isinstance(entry, str):
                raise DataValidationError(f"{context} entries must be strings.")
            result.append(entry)
        return result

    @staticmethod
    def _require_literal(value: object, allowed: set[str], context: str) -> str:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        if value not in allowed:
            raise DataValidationError(f"{context} must be one of {sorted(allowed)}.")
        return value
