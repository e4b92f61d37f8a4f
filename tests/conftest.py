"""Shared test fixtures and helpers."""

from __future__ import annotations

import math

import pytest

from dtmfkit.config import COL_FREQUENCIES, DEFAULT_SAMPLE_RATE, KEY_MATRIX, ROW_FREQUENCIES
from dtmfkit.dtmf.sink import DigitSink


def tone(
    digit: str,
    n_samples: int,
    *,
    amplitude: int = 8000,
    row_amplitude: int | None = None,
    col_amplitude: int | None = None,
    sample_rate: int = DEFAULT_SAMPLE_RATE,
) -> list[int]:
    """Synthesize the two-tone waveform for *digit* as int16 samples."""
    index = KEY_MATRIX.index(digit)
    f_row = ROW_FREQUENCIES[index // 4]
    f_col = COL_FREQUENCIES[index % 4]
    a_row = amplitude if row_amplitude is None else row_amplitude
    a_col = amplitude if col_amplitude is None else col_amplitude
    return [
        int(
            round(
                a_row * math.sin(2 * math.pi * f_row * n / sample_rate)
                + a_col * math.sin(2 * math.pi * f_col * n / sample_rate)
            )
        )
        for n in range(n_samples)
    ]


def silence(n_samples: int) -> list[int]:
    return [0] * n_samples


class RecordingSink(DigitSink):
    """Sink that records every call it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []

    def begin(self, digit: str, duration: int) -> None:
        self.calls.append(("begin", (digit, duration)))

    def extend(self, samples: int) -> None:
        self.calls.append(("extend", samples))


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()
