"""Local key-value store: one JSON document per key in a data directory.

Every key is stored as ``<directory>/<prefix><key>.json``. The prefix keeps
this application's files apart from anything else living in the same
directory, and ``clear()`` only touches prefixed files.

Reads are total: a missing or unparsable document reads as ``None``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_PREFIX = "shopping_manager_"
_SUFFIX = ".json"


class JsonFileStore:

    def __init__(self, directory: Path, prefix: str = DEFAULT_PREFIX) -> None:
        self._directory = Path(directory)
        self._prefix = prefix

    @property
    def directory(self) -> Path:
        return self._directory

    def get(self, key: str) -> Any | None:
        """Return the stored value, or None if absent or corrupted."""
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning("storage_key_corrupted", key=key, path=str(path), error=str(exc))
            return None

    def set(self, key: str, value: Any) -> None:
        if value is None:
            raise ValueError("Cannot save None. Use remove() to delete a key.")
        self._directory.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(
            json.dumps(value, indent=2) + "\n", encoding="utf-8"
        )

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)

    def clear(self) -> None:
        """Remove every key owned by this store (prefixed files only)."""
        for path in self._owned_files():
            path.unlink(missing_ok=True)

    def keys(self) -> list[str]:
        return sorted(
            path.name[len(self._prefix):-len(_SUFFIX)] for path in self._owned_files()
        )

    # --- File helpers ---------------------------------------------------------

    def _path(self, key: str) -> Path:
        return self._directory / f"{self._prefix}{key}{_SUFFIX}"

    def _owned_files(self) -> list[Path]:
        if not self._directory.exists():
            return []
        return list(self._directory.glob(f"{self._prefix}*{_SUFFIX}"))
