"""A bounded in-memory key/value store backed by an append-only flash log."""

from __future__ import annotations

from .flash import FlashError, FlashMemory
from .record import RECORD_SIZE, Record

MAX_RECORDS = 16
SIMULATED_MAX_RECORDS = 4


class DatabaseError(Exception):
    """Base class for database errors."""


class DatabaseFull(DatabaseError):
    """Raised when a new key would exceed the record limit."""


class KeyNotFound(DatabaseError):
    """Raised when a key is not in the database."""


class FlashFull(DatabaseError):
    """Raised when no space is left in flash for another record."""


class Database:
    """Key/value store holding at most ``max_records`` keys; restores itself from flash."""

    def __init__(self, flash: FlashMemory | None = None, max_records: int = MAX_RECORDS) -> None:
        if max_records < 1:
            raise ValueError("max_records must be at least 1")
        self.flash = flash if flash is not None else FlashMemory()
        self.max_records = max_records
        self._store: dict[str, str] = {}
        self.next_offset = 0
        self.restore()

    def _insert(self, key: str, value: str) -> bool:
        if key not in self._store and len(self._store) >= self.max_records:
            return False
        self._store[key] = value
        return True

    def create(self, key: str, value: str) -> None:
        """Insert or replace ``key``; raise DatabaseFull if a new key does not fit."""
        Record(key, value)
        if not self._insert(key, value):
            raise DatabaseFull("DB full")

    def read(self, key: str) -> str | None:
        """Return the value for ``key``, or None if absent."""
        return self._store.get(key)

    def update(self, key: str, value: str) -> None:
        """Replace the value of an existing key."""
        Record(key, value)
        if key not in self._store:
            raise KeyNotFound("Key not found")
        self._store[key] = value

    def delete(self, key: str) -> None:
        """Remove an existing key."""
        try:
            del self._store[key]
        except KeyError:
            raise KeyNotFound("Key not found") from None

    def persist(self, record: Record) -> None:
        """Append ``record`` to the flash log."""
        if self.next_offset + RECORD_SIZE > self.flash.size:
            raise FlashFull("Flash full")
        try:
            self.flash.write(self.flash.start + self.next_offset, record.to_bytes())
        except FlashError as exc:
            raise DatabaseError(str(exc)) from exc
        self.next_offset += RECORD_SIZE

    def restore(self) -> None:
        """Rebuild the store from the flash log, stopping at the first invalid slot."""
        self._store.clear()
        self.next_offset = 0
        while self.next_offset + RECORD_SIZE <= self.flash.size:
            raw = self.flash.read(self.flash.start + self.next_offset, RECORD_SIZE)
            try:
                record = Record.from_bytes(raw)
            except ValueError:
                break
            self._insert(record.key, record.value)
            self.next_offset += RECORD_SIZE

    def __len__(self) -> int:
        return len(self._store)