"""Digit sinks: where debounced digits are recorded."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from dtmfkit.config import MAX_DIGITS
from dtmfkit.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class DigitRecord:
    """A recognized digit and how long it has been held."""

    digit: str
    """The DTMF digit ('0'-'9', '*', '#', 'A'-'D')."""

    duration: int
    """Duration in samples. Grows while the digit stays active."""

    def duration_ms(self, sample_rate: int) -> float:
        return self.duration * 1000.0 / sample_rate


class DigitSink(ABC):
    """Receives digit begin/continuation notifications from a Debouncer."""

    @abstractmethod
    def begin(self, digit: str, duration: int) -> None:
        """A new digit was recognized with an initial duration in samples."""
        ...

    @abstractmethod
    def extend(self, samples: int) -> None:
        """The most recently begun digit is still active for *samples* more."""
        ...


class DigitBuffer(DigitSink):
    """Bounded in-memory digit log.

    When the buffer is full a new digit is dropped and counted in
    ``lost_digits``; continuation of a dropped digit is ignored so that it
    never inflates an older record.

    Parameters:
        capacity: Maximum number of records held before digits are lost.
    """

    def __init__(self, capacity: int = MAX_DIGITS) -> None:
        if capacity < 1:
            raise ConfigurationError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._records: list[DigitRecord] = []
        self._last: DigitRecord | None = None
        self.detected_digits = 0
        self.lost_digits = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def records(self) -> list[DigitRecord]:
        return list(self._records)

    @property
    def digits(self) -> str:
        """Buffered digits as a string, oldest first."""
        return "".join(r.digit for r in self._records)

    def __len__(self) -> int:
        return len(self._records)

    def begin(self, digit: str, duration: int) -> None:
        self.detected_digits += 1
        if len(self._records) >= self._capacity:
            self.lost_digits += 1
            self._last = None
            logger.warning(
                "Digit buffer full (%d), dropping digit %r (lost=%d)",
                self._capacity,
                digit,
                self.lost_digits,
            )
            return
        record = DigitRecord(digit=digit, duration=duration)
        self._records.append(record)
        self._last = record

    def extend(self, samples: int) -> None:
        if self._last is not None:
            self._last.duration += samples

    def drain(self) -> list[DigitRecord]:
        """Return and remove all buffered records.

        A digit that is still active keeps growing in the returned record.
        """
        records = self._records
        self._records = []
        return records

    def clear(self) -> None:
        """Drop all records and zero the counters."""
        self._records = []
        self._last = None
        self.detected_digits = 0
        self.lost_digits = 0
