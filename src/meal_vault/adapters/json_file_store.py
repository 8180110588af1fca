"""Key-value storage persisted as a single JSON object on disk."""

import asyncio
import json
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path

from meal_vault.services.storage import KeyValueStorage


@dataclass
class JsonFileKeyValueStorage(KeyValueStorage):
    """Durable local storage.

    Every write rewrites the whole file through a temporary sibling and an
    atomic rename, so a crash leaves either the old or the new contents.
    """

    path: Path
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    @classmethod
    def create(cls, path: str | Path) -> "JsonFileKeyValueStorage":
        return cls(path=Path(path))

    async def get(self, key: str) -> str | None:
        entries = await asyncio.to_thread(self._load)
        return entries.get(key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._update, key, value)

    async def remove(self, key: str) -> None:
        await asyncio.to_thread(self._update, key, None)

    async def clear(self) -> None:
        await asyncio.to_thread(self._dump, {})

    async def list_keys(self) -> list[str]:
        entries = await asyncio.to_thread(self._load)
        return list(entries)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        payload = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            raise ValueError(f"Storage file {self.path} does not hold an object")
        return {str(key): str(value) for key, value in payload.items()}

    def _update(self, key: str, value: str | None) -> None:
        with self._lock:
            entries = self._load()
            if value is None:
                if key not in entries:
                    return
                entries.pop(key)
            else:
                entries[key] = value
            self._write(entries)

    def _dump(self, entries: dict[str, str]) -> None:
        with self._lock:
            self._write(entries)

    def _write(self, entries: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        tmp_path.write_text(json.dumps(entries, indent=2), encoding="utf-8")
        os.replace(tmp_path, self.path)
