"""Typed persistence errors."""


class PersistenceError(Exception):
    """Base error for key-value storage failures."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"{message} (key={key})")
        self.key = key


class PersistenceReadError(PersistenceError):
    """Storage read failed or returned a malformed record."""


class PersistenceWriteError(PersistenceError):
    """Storage write failed; the caller must not assume state changed."""
