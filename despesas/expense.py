"""A single expense and its fixed-size binary record."""

from __future__ import annotations

import struct
from dataclasses import dataclass

DESCRIPTION_SIZE = 100
MIN_YEAR = 1925
MAX_YEAR = 2125

# description (NUL-padded), value (float32), day, month, year (int32)
_RECORD = struct.Struct("<100sf3i")
RECORD_SIZE = _RECORD.size


def _fit_description(description: str) -> bytes:
    """Encode a description so it fits the record with a terminating NUL."""
    raw = description.encode("utf-8")[: DESCRIPTION_SIZE - 1]
    return raw.decode("utf-8", "ignore").encode("utf-8")


@dataclass
class Expense:
    """An expense with a description, an amount and a date."""

    description: str
    value: float
    day: int
    month: int
    year: int

    def to_bytes(self) -> bytes:
        """Return the fixed-size binary record for this expense."""
        try:
            return _RECORD.pack(
                _fit_description(self.description),
                self.value,
                self.day,
                self.month,
                self.year,
            )
        except struct.error as exc:
            raise ValueError(f"cannot encode expense: {exc}") from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> Expense:
        """Build an expense from one binary record."""
        if len(data) != RECORD_SIZE:
            raise ValueError(
                f"expected {RECORD_SIZE} bytes, got {len(data)}"
            )
        raw, value, day, month, year = _RECORD.unpack(data)
        description = raw.split(b"\0", 1)[0].decode("utf-8", "replace")
        return cls(description, value, day, month, year)


def is_valid_date(day: int, month: int, year: int) -> bool:
    """Check that the day, month and year lie within the accepted ranges."""
    return 1 <= day <= 31 and 1 <= month <= 12 and MIN_YEAR <= year <= MAX_YEAR