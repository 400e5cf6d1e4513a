"""File helpers shared by the JSON-backed repositories.

Each repository keeps a JSON array in a single file. Writes go to a
temporary sibling and are moved into place with ``os.replace``, so
readers see either the old array or the new one, never a torn write.
Read-modify-write cycles hold an exclusive lock on ``<file>.lock``,
which serialises writers across threads and processes alike.
"""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from decimal import InvalidOperation
from pathlib import Path

from filelock import FileLock

from storefront.domain.exceptions import PersistenceFailure, ValidationError

# Raised when a stored record is structurally valid JSON but not a valid entity.
_RECORD_ERRORS = (KeyError, TypeError, ValueError, InvalidOperation, ValidationError)


@contextmanager
def locked(file_path: Path) -> Iterator[None]:
    """Hold the store's inter-process lock for the duration of the block."""
    lock = FileLock(f"{file_path}.lock")
    try:
        lock.acquire()
    except OSError as exc:
        raise PersistenceFailure(f"Could not lock {file_path.name}: {exc}") from exc
    try:
        yield
    finally:
        lock.release()


@contextmanager
def decoding(file_path: Path) -> Iterator[None]:
    """Report malformed records as PersistenceFailure."""
    try:
        yield
    except _RECORD_ERRORS as exc:
        raise PersistenceFailure(
            f"Corrupt record in {file_path.name}: {type(exc).__name__}: {exc}"
        ) from exc


def load_records(file_path: Path) -> list[dict]:
    try:
        return json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise PersistenceFailure(f"Could not read {file_path.name}: {exc}") from exc


def write_records(file_path: Path, records: list[dict]) -> None:
    payload = json.dumps(records, indent=2) + "\n"
    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as exc:
        raise PersistenceFailure(f"Could not write {file_path.name}: {exc}") from exc


def ensure_file(file_path: Path) -> None:
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise PersistenceFailure(f"Could not create {file_path.parent}: {exc}") from exc
    with locked(file_path):
        if not file_path.exists():
            write_records(file_path, [])
