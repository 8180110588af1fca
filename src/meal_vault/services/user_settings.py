"""User settings service."""

from dataclasses import dataclass

from meal_vault.domain.user_settings import (
    UserSettings,
    settings_from_record,
    settings_to_record,
)
from meal_vault.services.storage import (
    USER_SETTINGS_KEY,
    JsonRecordStore,
    ReadResult,
    as_record,
)


@dataclass
class UserSettingsService:
    """Service for the singleton settings record."""

    records: JsonRecordStore

    async def read_settings(self) -> ReadResult[UserSettings]:
        """Return stored settings along with any read error."""
        return await self.records.read(
            USER_SETTINGS_KEY,
            parse=lambda payload: settings_from_record(as_record(payload)),
            default=UserSettings,
        )

    async def get_settings(self) -> UserSettings:
        """Return stored settings or the defaults when none are readable."""
        return (await self.read_settings()).value

    async def save_settings(self, settings: UserSettings) -> None:
        """Overwrite the whole settings record."""
        await self.records.write(USER_SETTINGS_KEY, settings_to_record(settings))
