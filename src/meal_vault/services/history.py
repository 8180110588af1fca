"""History archive of vaulted days."""

import asyncio
import logging
from dataclasses import dataclass, field

from meal_vault.domain.history import (
    HistoryEntry,
    history_entry_from_record,
    history_entry_to_record,
)
from meal_vault.services.storage import (
    HISTORY_KEY,
    JsonRecordStore,
    ReadResult,
    parse_record_list,
    writable_value,
)

_logger = logging.getLogger(__name__)


@dataclass
class HistoryService:
    """Append-only archive; entries are listed newest date first."""

    records: JsonRecordStore
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)

    async def append(self, entry: HistoryEntry) -> None:
        """Append an entry; a date may be vaulted more than once."""
        async with self._lock:
            entries = writable_value(await self._read_stored())
            entries.append(entry)
            await self.records.write(
                HISTORY_KEY, [history_entry_to_record(item) for item in entries]
            )
        _logger.info("History entry appended: date=%s", entry.date)

    async def read_history(self) -> ReadResult[list[HistoryEntry]]:
        """Return sorted entries along with any read error."""
        result = await self._read_stored()
        # sorted() is stable, so equal dates keep their storage order.
        ordered = sorted(result.value, key=lambda entry: entry.date, reverse=True)
        return ReadResult(ordered, result.error)

    async def get_history(self) -> list[HistoryEntry]:
        """Return entries by date descending, or an empty list when unreadable."""
        return (await self.read_history()).value

    async def _read_stored(self) -> ReadResult[list[HistoryEntry]]:
        return await self.records.read(
            HISTORY_KEY,
            parse=lambda payload: parse_record_list(payload, history_entry_from_record),
            default=list,
        )
