from __future__ import annotations

import copy
import json
import logging
import os
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from threading import RLock
from typing import Any, Dict, Generic, Iterable, List, Mapping, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")

DEFAULT_DATETIME_FIELDS: Tuple[str, ...] = ("created_at", "updated_at")
# In-memory field name -> name used in the JSON file
DEFAULT_FILE_FIELD_NAMES: Dict[str, str] = {"created_at": "createdAt", "updated_at": "updatedAt"}


# PUBLIC_INTERFACE
class DataStore(ABC, Generic[V]):
    """Abstract key-value contract shared by all storage backends."""

    @abstractmethod
    def get(self, key: str) -> Optional[V]:
        """Return a copy of the value stored under key, or None."""

    @abstractmethod
    def get_all(self) -> List[V]:
        """Return copies of all values in insertion order."""

    @abstractmethod
    def set(self, key: str, value: V) -> None:
        """Insert or overwrite the value stored under key."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove key. Return True if an entry existed and was removed."""

    @abstractmethod
    def has(self, key: str) -> bool:
        """Return True if key is present."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored entries."""

    @abstractmethod
    def clear(self) -> None:
        """Remove all entries."""


class InMemoryStore(DataStore[V]):
    """
    Thread-safe in-memory store. Contents live as long as the process.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: Dict[str, V] = {}

    def get(self, key: str) -> Optional[V]:
        with self._lock:
            item = self._items.get(key)
            return None if item is None else copy.copy(item)

    def get_all(self) -> List[V]:
        with self._lock:
            # Return copies to avoid external mutation
            return [copy.copy(v) for v in self._items.values()]

    def set(self, key: str, value: V) -> None:
        with self._lock:
            self._items[key] = copy.copy(value)

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._items.pop(key, None) is not None

    def has(self, key: str) -> bool:
        with self._lock:
            return key in self._items

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()


def _encode(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _parse_datetime(raw: str) -> datetime:
    # fromisoformat only accepts a trailing "Z" from Python 3.11 on
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class JsonFileStore(InMemoryStore[V]):
    """
    In-memory store mirrored to a JSON file.

    The file holds a JSON array of ``[key, value]`` pairs and is rewritten in
    full after every mutation. Fields named in ``datetime_fields`` are written
    as ISO-8601 strings and parsed back into timezone-aware datetimes on load;
    a trailing ``Z`` and naive timestamps are read as UTC. Dict values have
    their keys renamed through ``field_names`` on the way to disk and back, so
    the file keeps the ``createdAt``/``updatedAt`` layout.

    I/O and parse errors are logged and swallowed: a failed load starts from an
    empty store, a failed save leaves the file behind the in-memory state.
    """

    def __init__(
        self,
        file_path: str,
        datetime_fields: Iterable[str] = DEFAULT_DATETIME_FIELDS,
        field_names: Mapping[str, str] = DEFAULT_FILE_FIELD_NAMES,
    ) -> None:
        super().__init__()
        self._file_path = file_path
        self._datetime_fields = tuple(datetime_fields)
        self._to_file = dict(field_names)
        self._from_file = {disk: name for name, disk in self._to_file.items()}
        self._load()

    @property
    def file_path(self) -> str:
        return self._file_path

    @staticmethod
    def _rename(value: Any, names: Mapping[str, str]) -> Any:
        if not isinstance(value, dict):
            return value
        return {names.get(k, k): v for k, v in value.items()}

    def _rehydrate(self, value: Any) -> Any:
        value = self._rename(value, self._from_file)
        if isinstance(value, dict):
            for name in self._datetime_fields:
                raw = value.get(name)
                if isinstance(raw, str):
                    value[name] = _parse_datetime(raw)
        return value

    def _load(self) -> None:
        if not os.path.exists(self._file_path):
            return
        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                parsed = json.load(f)
            if not isinstance(parsed, list):
                raise ValueError("expected a JSON array of [key, value] pairs")
            loaded: Dict[str, Any] = {}
            for index, entry in enumerate(parsed):
                if not isinstance(entry, list) or len(entry) != 2:
                    raise ValueError(f"entry {index} is not a [key, value] pair")
                key, value = entry
                loaded[str(key)] = self._rehydrate(value)
        except (OSError, ValueError, TypeError) as e:
            logger.error("Error loading data from file %s: %s", self._file_path, e)
            return
        with self._lock:
            self._items = loaded
        logger.info("Loaded %d entries from %s", len(loaded), self._file_path)

    def _save(self) -> None:
        with self._lock:
            data = [[key, self._rename(value, self._to_file)] for key, value in self._items.items()]
            try:
                os.makedirs(os.path.dirname(self._file_path) or ".", exist_ok=True)
                payload = json.dumps(data, indent=2, default=_encode)
                with open(self._file_path, "w", encoding="utf-8") as f:
                    f.write(payload)
            except (OSError, TypeError, ValueError) as e:
                logger.error("Error saving data to file %s: %s", self._file_path, e)

    def set(self, key: str, value: V) -> None:
        with self._lock:
            super().set(key, value)
            self._save()

    def delete(self, key: str) -> bool:
        with self._lock:
            removed = super().delete(key)
            if removed:
                self._save()
            return removed

    def clear(self) -> None:
        with self._lock:
            super().clear()
            self._save()
