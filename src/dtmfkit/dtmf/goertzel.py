"""Fixed-point Goertzel resonators for the eight DTMF frequencies."""

from __future__ import annotations

import math

from dtmfkit.config import COL_FREQUENCIES, ROW_FREQUENCIES
from dtmfkit.errors import ConfigurationError

_LIMIT = 1 << 15


class Resonator:
    """Single-frequency energy estimator over one block of samples.

    ``v2``/``v3`` carry the recurrence without a binary point. ``coeff`` is
    ``2 * cos(2 * pi * freq / sample_rate)`` in 15-bit fixed point. ``chunky``
    is the power-of-two exponent that keeps ``v2``/``v3`` within 16 bits:
    whenever ``v3`` grows past ``2**15`` the history is halved and later
    input samples are shifted down by one more bit.
    """

    __slots__ = ("v2", "v3", "chunky", "coeff", "freq")

    def __init__(self, freq: float, sample_rate: int) -> None:
        if sample_rate <= 0:
            raise ConfigurationError(f"sample_rate must be positive, got {sample_rate}")
        if not 0 < freq < sample_rate / 2:
            raise ConfigurationError(
                f"frequency {freq}Hz is outside (0, {sample_rate / 2}) for "
                f"sample_rate {sample_rate}"
            )
        fac = 32768.0 * 2.0 * math.cos(2.0 * math.pi * freq / sample_rate)
        if not math.isfinite(fac):
            raise ConfigurationError(f"invalid Goertzel coefficient for {freq}Hz")
        self.freq = freq
        self.coeff = round(fac)
        self.v2 = 0
        self.v3 = 0
        self.chunky = 0

    def feed(self, sample: int) -> None:
        v1 = self.v2
        self.v2 = self.v3
        # Discard the binary fraction introduced by coeff, scale sample to match
        self.v3 = ((self.coeff * self.v2) >> 15) - v1 + (sample >> self.chunky)
        while abs(self.v3) > _LIMIT:
            self.chunky += 1
            self.v3 >>= 1
            self.v2 >>= 1

    def result(self) -> float:
        value = self.v3 * self.v3 + self.v2 * self.v2
        value -= ((self.v2 * self.v3) >> 15) * self.coeff
        # Exponent doubles because v2 and v3 were multiplied together
        return float(value) * float(1 << (self.chunky * 2))

    def reset(self) -> None:
        self.v2 = 0
        self.v3 = 0
        self.chunky = 0

    def __repr__(self) -> str:
        return (
            f"Resonator(freq={self.freq}, coeff={self.coeff}, "
            f"v2={self.v2}, v3={self.v3}, chunky={self.chunky})"
        )


class ToneBank:
    """The four row and four column resonators of one detection session."""

    def __init__(self, sample_rate: int) -> None:
        self.rows = [Resonator(f, sample_rate) for f in ROW_FREQUENCIES]
        self.cols = [Resonator(f, sample_rate) for f in COL_FREQUENCIES]
        # Bound methods, in the order the hot path calls them
        r0, r1, r2, r3 = self.rows
        c0, c1, c2, c3 = self.cols
        self._feeds = (
            r0.feed, c0.feed, r1.feed, c1.feed,
            r2.feed, c2.feed, r3.feed, c3.feed,
        )  # fmt: skip

    def feed(self, sample: int) -> None:
        f0, f1, f2, f3, f4, f5, f6, f7 = self._feeds
        f0(sample)
        f1(sample)
        f2(sample)
        f3(sample)
        f4(sample)
        f5(sample)
        f6(sample)
        f7(sample)

    def results_row(self) -> list[float]:
        return [r.result() for r in self.rows]

    def results_col(self) -> list[float]:
        return [c.result() for c in self.cols]

    def reset(self) -> None:
        """Reset all eight resonators; block boundaries are the only caller."""
        for r in self.rows:
            r.reset()
        for c in self.cols:
            c.reset()
