"""Fixed-size key/value records as stored in flash."""

from __future__ import annotations

from dataclasses import dataclass

MAX_KEY_LEN = 32
MAX_VALUE_LEN = 128
RECORD_SIZE = MAX_KEY_LEN + MAX_VALUE_LEN


@dataclass(frozen=True)
class Record:
    """A key/value pair whose encoded sizes fit the fixed record layout."""

    key: str
    value: str

    def __post_init__(self) -> None:
        if len(self.key.encode("utf-8")) > MAX_KEY_LEN:
            raise ValueError(f"key longer than {MAX_KEY_LEN} bytes")
        if len(self.value.encode("utf-8")) > MAX_VALUE_LEN:
            raise ValueError(f"value longer than {MAX_VALUE_LEN} bytes")

    def to_bytes(self) -> bytes:
        """Encode as a zero-padded key field followed by a zero-padded value field."""
        key = self.key.encode("utf-8").ljust(MAX_KEY_LEN, b"\0")
        value = self.value.encode("utf-8").ljust(MAX_VALUE_LEN, b"\0")
        return key + value

    @classmethod
    def from_bytes(cls, data: bytes) -> Record:
        """Decode a record; raise ValueError if the bytes do not hold one."""
        data = bytes(data)
        if len(data) != RECORD_SIZE:
            raise ValueError(f"record must be exactly {RECORD_SIZE} bytes")
        try:
            key = data[:MAX_KEY_LEN].decode("utf-8")
            value = data[MAX_KEY_LEN:].decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError("record bytes are not valid UTF-8") from exc
        return cls(key.rstrip("\0"), value.rstrip("\0"))