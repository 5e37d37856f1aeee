"""Reads one definitions file into a dict keyed by definition id."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from .errors import DataLoadError, DataValidationError

logger = logging.getLogger(__name__)


def read_definition_file(path: Path) -> dict[str, object]:
    if not path.is_file():
        raise DataLoadError(f"Missing definitions file {path}", path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"{path} is not valid JSON (line {exc.lineno}: {exc.msg})", path) from exc
    except OSError as exc:
        raise DataLoadError(f"Cannot read {path}: {exc.strerror or exc}", path) from exc

    if not isinstance(payload, dict):
        raise DataValidationError(
            f"{path} must contain a JSON object keyed by id, not {type(payload).__name__}"
        )
    logger.debug("Read %d definitions from %s", len(payload), path)
    return payload
