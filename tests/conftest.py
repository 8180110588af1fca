"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import pytest

from meal_vault.adapters.memory_store import InMemoryKeyValueStorage
from meal_vault.config import Settings
from meal_vault.containers import AppContainer, build_container
from meal_vault.domain.meals import Meal, MealType
from meal_vault.services.clock import Clock
from meal_vault.services.storage import KeyValueStorage


@dataclass
class FixedClock(Clock):
    """Clock frozen at a date and instant; ``now_ms`` ticks by one per call."""

    date: str = "2024-03-05"
    instant_ms: int = 1_709_640_000_000

    def today(self) -> str:
        return self.date

    def now_ms(self) -> int:
        self.instant_ms += 1
        return self.instant_ms


@dataclass
class FlakyStorage(KeyValueStorage):
    """In-memory storage that fails on demand."""

    entries: dict[str, str] = field(default_factory=dict)
    fail_reads: bool = False
    fail_writes: bool = False
    writes: list[str] = field(default_factory=list)

    async def get(self, key: str) -> str | None:
        if self.fail_reads:
            raise OSError("disk unavailable")
        return self.entries.get(key)

    async def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        self.writes.append(key)
        self.entries[key] = value

    async def remove(self, key: str) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        self.entries.pop(key, None)

    async def clear(self) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        self.entries.clear()

    async def list_keys(self) -> list[str]:
        if self.fail_reads:
            raise OSError("disk unavailable")
        return list(self.entries)


class InterleavingStorage(InMemoryKeyValueStorage):
    """In-memory storage whose reads hand control back to the event loop.

    The value is captured before yielding, so concurrent read-modify-write
    cycles see the same snapshot unless something serializes them.
    """

    async def get(self, key: str) -> str | None:
        value = await super().get(key)
        await asyncio.sleep(0)
        return value


def make_meal(  # noqa: PLR0913
    meal_id: str = "meal-1",
    name: str = "Oats",
    calories: int = 300,
    protein_g: float = 10.0,
    carbs_g: float = 50.0,
    fat_g: float = 5.0,
    meal_type: MealType = MealType.CUSTOM,
) -> Meal:
    return Meal(
        id=meal_id,
        name=name,
        calories=calories,
        protein_g=protein_g,
        carbs_g=carbs_g,
        fat_g=fat_g,
        servings=1,
        timestamp=1_709_640_000_000,
        type=meal_type,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_path="unused.json", timezone="UTC")


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def storage() -> FlakyStorage:
    return FlakyStorage()


@pytest.fixture
def container(
    settings: Settings, storage: FlakyStorage, clock: FixedClock
) -> AppContainer:
    return build_container(settings, storage=storage, clock=clock)


@pytest.fixture
def interleaving_container(settings: Settings, clock: FixedClock) -> AppContainer:
    return build_container(settings, storage=InterleavingStorage(), clock=clock)
