"""Persistent storage for window placement records."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from cattrs.errors import BaseValidationError

from winstate.record import WindowPlacementRecord, record_from_json, record_to_json


class StorageError(Exception):
    """Error reading or writing a stored record."""


def ensure_directory(path: Path) -> None:
    """Create the parent directory of path if needed."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(f"cannot create {path.parent}: {e}") from e


def read_record(path: Path) -> WindowPlacementRecord:
    """Load the record stored at path."""
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise StorageError(f"cannot read {path}: {e}") from e

    try:
        record = record_from_json(data)
    except BaseValidationError as e:
        raise StorageError(f"malformed record in {path}: {e}") from e
    if record is None:
        raise StorageError(f"{path} does not hold a JSON object")
    return record


def _write_atomic(path: Path, data: dict[str, Any]) -> None:
    # Write to temp file, then atomic rename
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".json.tmp")
    try:
        with os.fdopen(fd, "w") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def write_record(path: Path, record: WindowPlacementRecord) -> None:
    """Atomically save record to path."""
    try:
        _write_atomic(path, record_to_json(record))
    except (OSError, TypeError, ValueError) as e:
        raise StorageError(f"cannot write {path}: {e}") from e
