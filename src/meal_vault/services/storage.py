"""Key-value storage interface and JSON record access."""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from meal_vault.errors import PersistenceReadError, PersistenceWriteError

DAILY_LOG_PREFIX = "daily_log_"
USER_SETTINGS_KEY = "user_settings"
SAVED_RECIPES_KEY = "saved_recipes"
HISTORY_KEY = "history_entries"

T = TypeVar("T")

_logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Durable string key-value storage."""

    async def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""

    async def set(self, key: str, value: str) -> None:
        """Store a value under a key."""

    async def remove(self, key: str) -> None:
        """Remove a key; absent keys are ignored."""

    async def clear(self) -> None:
        """Remove every key."""

    async def list_keys(self) -> list[str]:
        """Return all stored keys."""


@dataclass(frozen=True)
class ReadResult(Generic[T]):
    """Value read from storage, with the error that forced a fallback, if any."""

    value: T
    error: PersistenceReadError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def daily_log_key(date: str) -> str:
    return f"{DAILY_LOG_PREFIX}{date}"


@dataclass
class JsonRecordStore:
    """Reads and writes JSON records, translating storage failures into typed errors.

    Reads never raise: a missing key yields the default, and an unreadable key
    yields the default together with a ``PersistenceReadError``. Writes raise
    ``PersistenceWriteError``.
    """

    storage: KeyValueStorage

    async def read(
        self, key: str, parse: Callable[[object], T], default: Callable[[], T]
    ) -> ReadResult[T]:
        try:
            raw = await self.storage.get(key)
        except Exception as exc:
            return _read_failure(key, "Storage read failed", exc, default)
        if raw is None:
            return ReadResult(default())
        try:
            return ReadResult(parse(json.loads(raw)))
        except (ValueError, TypeError, KeyError, AttributeError) as exc:
            return _read_failure(key, "Malformed record", exc, default)

    async def write(self, key: str, payload: object) -> None:
        try:
            await self.storage.set(key, json.dumps(payload))
        except Exception as exc:
            _logger.exception("Storage write failed: key=%s", key)
            raise PersistenceWriteError(key, "Storage write failed") from exc

    async def remove(self, key: str) -> None:
        try:
            await self.storage.remove(key)
        except Exception as exc:
            _logger.exception("Storage remove failed: key=%s", key)
            raise PersistenceWriteError(key, "Storage remove failed") from exc

    async def clear(self) -> None:
        try:
            await self.storage.clear()
        except Exception as exc:
            _logger.exception("Storage clear failed")
            raise PersistenceWriteError("*", "Storage clear failed") from exc

    async def list_keys(self, prefix: str = "") -> ReadResult[list[str]]:
        try:
            keys = await self.storage.list_keys()
        except Exception as exc:
            return _read_failure("*", "Storage key listing failed", exc, list)
        return ReadResult([key for key in keys if key.startswith(prefix)])


def _read_failure(
    key: str, message: str, exc: Exception, default: Callable[[], T]
) -> ReadResult[T]:
    _logger.warning("%s: key=%s error=%s", message, key, exc)
    error = PersistenceReadError(key, message)
    error.__cause__ = exc
    return ReadResult(default(), error)


def parse_record_list(payload: object, parse: Callable[[dict], T]) -> list[T]:
    """Parse a JSON array of records."""
    if not isinstance(payload, list):
        raise ValueError("expected a list of records")
    return [parse(row) for row in payload]


def as_record(payload: object) -> dict:
    """Return a JSON object payload or raise for any other shape."""
    if not isinstance(payload, dict):
        raise ValueError("expected a record")
    return payload


def writable_value(result: ReadResult[T]) -> T:
    """Return a read value for modification, or raise if the record was unreadable."""
    if result.error is not None:
        raise PersistenceWriteError(
            result.error.key, "Refusing to overwrite an unreadable record"
        ) from result.error
    return result.value
