"""An in-memory model of a NOR flash region with page erase and double-word programming."""

from __future__ import annotations

FLASH_BASE = 0x08000000
PAGE_SIZE = 2048
DB_START = 0x080F0000
DB_END = 0x080F1000
DB_SIZE = DB_END - DB_START

ERASED_BYTE = 0xFF
WORD_SIZE = 8


class FlashError(Exception):
    """Raised when a flash operation is rejected."""


class FlashMemory:
    """A flash region starting at ``start`` and ``size`` bytes long, erased on creation."""

    def __init__(self, start: int = DB_START, size: int = DB_SIZE) -> None:
        if start < FLASH_BASE:
            raise FlashError("Address below flash base")
        if size <= 0:
            raise ValueError("flash size must be positive")
        self.start = start
        self.size = size
        self.end = start + size
        self._cells = bytearray([ERASED_BYTE]) * size

    def _offset(self, address: int, length: int) -> int:
        if address < self.start or address + length > self.end:
            raise FlashError("Address outside flash region")
        return address - self.start

    def erase_page(self, address: int) -> None:
        """Erase the page that contains ``address`` back to 0xFF."""
        if address < FLASH_BASE:
            raise FlashError("Address below flash base")
        page_start = FLASH_BASE + (address - FLASH_BASE) // PAGE_SIZE * PAGE_SIZE
        low = max(page_start, self.start)
        high = min(page_start + PAGE_SIZE, self.end)
        if low >= high:
            raise FlashError("Address outside flash region")
        self._cells[low - self.start:high - self.start] = bytes([ERASED_BYTE]) * (high - low)

    def read(self, address: int, length: int) -> bytes:
        """Return ``length`` bytes starting at ``address``."""
        if length < 0:
            raise ValueError("length must not be negative")
        offset = self._offset(address, length)
        return bytes(self._cells[offset:offset + length])

    def write(self, address: int, data: bytes) -> None:
        """Program ``data`` at ``address``; both must be 8-byte aligned.

        Programming can only clear bits, as on real NOR flash.
        """
        data = bytes(data)
        if address % WORD_SIZE or len(data) % WORD_SIZE:
            raise FlashError("Address and data length must be 8-byte aligned")
        offset = self._offset(address, len(data))
        end = offset + len(data)
        current = int.from_bytes(self._cells[offset:end], "little")
        programmed = current & int.from_bytes(data, "little")
        self._cells[offset:end] = programmed.to_bytes(len(data), "little")