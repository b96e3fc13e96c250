"""JSON-file backed key-value store.

The whole document is read once when the store is opened and rewritten in full
after every mutation. There is no write batching: when ``set`` returns, the
change is on disk.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from pls_cli.models.exceptions import StoreError
from pls_cli.utils.logger import get_logger

T = TypeVar("T")

_JSON_VALUE = TypeAdapter(Any)


class KeyValueStore:
    """A mapping of string keys to JSON values persisted in a single file."""

    def __init__(self, path: Path, data: dict[str, Any] | None = None):
        self.path = Path(path)
        self._data: dict[str, Any] = data if data is not None else {}

    @classmethod
    def load_or_new(cls, path: Path) -> KeyValueStore:
        """Open the store at *path*, starting empty if the file does not exist.

        Raises:
            StoreError: If the file exists but is unreadable or not a JSON object
        """
        path = Path(path)
        logger = get_logger()
        if not path.exists():
            logger.debug("store %s not found, starting empty", path)
            return cls(path)

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise StoreError(f"Cannot read data file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise StoreError(f"Data file {path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise StoreError(f"Data file {path} does not contain a JSON object")

        logger.debug("store %s loaded (%d keys)", path, len(data))
        return cls(path, data)

    def get(self, key: str, expected_type: type[T] | TypeAdapter[T]) -> T | None:
        """Return the value under *key* validated as *expected_type*.

        A missing key and a value of the wrong shape both give ``None``.
        """
        if key not in self._data:
            return None

        adapter = (
            expected_type
            if isinstance(expected_type, TypeAdapter)
            else TypeAdapter(expected_type)
        )
        try:
            return adapter.validate_python(self._data[key])
        except ValidationError:
            get_logger().warning("store key %r has an unexpected shape, ignoring", key)
            return None

    def exists(self, key: str) -> bool:
        return key in self._data

    def set(self, key: str, value: Any) -> None:
        """Set *key* to *value* and write the document.

        Raises:
            StoreError: If the document could not be written
        """
        self.set_many({key: value})

    def set_many(self, values: Mapping[str, Any]) -> None:
        """Set several keys with a single write of the document."""
        previous = dict(self._data)
        for key, value in values.items():
            self._data[key] = _JSON_VALUE.dump_python(value, mode="json")
        try:
            self.dump()
        except StoreError:
            self._data = previous
            raise

    def remove(self, key: str) -> bool:
        """Remove *key*. Returns False if it was not present."""
        if key not in self._data:
            return False
        previous = dict(self._data)
        del self._data[key]
        try:
            self.dump()
        except StoreError:
            self._data = previous
            raise
        return True

    def dump(self) -> None:
        """Rewrite the whole document to disk."""
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(
                json.dumps(self._data, ensure_ascii=False, indent=2), encoding="utf-8"
            )
            os.replace(tmp_path, self.path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            get_logger().error("failed to write store %s: %s", self.path, e)
            raise StoreError(f"Cannot write data file {self.path}: {e}") from e
        get_logger().debug("store %s saved (%d keys)", self.path, len(self._data))
