"""In-memory key-value storage."""

from dataclasses import dataclass

from meal_vault.services.storage import KeyValueStorage


@dataclass
class InMemoryKeyValueStorage(KeyValueStorage):
    """Non-durable storage for tests and throwaway runs."""

    _entries: dict[str, str]

    def __init__(self, entries: dict[str, str] | None = None) -> None:
        self._entries = dict(entries or {})

    async def get(self, key: str) -> str | None:
        return self._entries.get(key)

    async def set(self, key: str, value: str) -> None:
        self._entries[key] = value

    async def remove(self, key: str) -> None:
        self._entries.pop(key, None)

    async def clear(self) -> None:
        self._entries.clear()

    async def list_keys(self) -> list[str]:
        return list(self._entries)
