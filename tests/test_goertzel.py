"""Tests for the fixed-point Goertzel resonators."""

from __future__ import annotations

import random

import pytest

from dtmfkit.dtmf.goertzel import Resonator, ToneBank
from dtmfkit.errors import ConfigurationError
from tests.conftest import tone

# ---------------------------------------------------------------------------
# Resonator
# ---------------------------------------------------------------------------


class TestResonatorInit:
    @pytest.mark.parametrize(
        ("freq", "coeff"),
        [
            (697.0, 55959),
            (770.0, 53913),
            (852.0, 51403),
            (941.0, 48438),
            (1209.0, 38145),
            (1336.0, 32649),
            (1477.0, 26169),
            (1633.0, 18630),
        ],
    )
    def test_coefficient_at_8khz(self, freq: float, coeff: int) -> None:
        assert Resonator(freq, 8000).coeff == coeff

    def test_starts_zeroed(self) -> None:
        r = Resonator(697.0, 8000)
        assert (r.v2, r.v3, r.chunky) == (0, 0, 0)

    def test_zero_sample_rate_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="sample_rate"):
            Resonator(697.0, 0)

    def test_negative_sample_rate_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            Resonator(697.0, -8000)

    def test_frequency_above_nyquist_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="outside"):
            Resonator(1633.0, 3000)

    def test_nan_frequency_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            Resonator(float("nan"), 8000)


class TestResonatorFeed:
    def test_recurrence(self) -> None:
        r = Resonator(697.0, 8000)
        r.feed(1000)
        assert (r.v2, r.v3) == (0, 1000)
        r.feed(0)
        # (55959 * 1000) >> 15 == 1707
        assert (r.v2, r.v3) == (1000, 1707)
        assert r.chunky == 0

    def test_result(self) -> None:
        r = Resonator(697.0, 8000)
        r.feed(1000)
        r.feed(0)
        # 1707^2 + 1000^2 - ((1000 * 1707) >> 15) * 55959
        assert r.result() == 1003981.0

    def test_rescales_until_in_range(self) -> None:
        r = Resonator(697.0, 8000)
        r.feed(32767)
        r.feed(32767)
        # 88724 needs two halvings to fit in 2^15
        assert r.chunky == 2
        assert r.v3 == 22181
        assert r.v2 == 8191

    def test_result_scales_by_chunky(self) -> None:
        r = Resonator(697.0, 8000)
        r.v2, r.v3, r.chunky = 100, 200, 3
        base = 200 * 200 + 100 * 100 - ((100 * 200) >> 15) * r.coeff
        assert r.result() == float(base) * 64.0

    def test_negative_samples_use_arithmetic_shift(self) -> None:
        r = Resonator(697.0, 8000)
        r.chunky = 1
        r.feed(-3)
        assert r.v3 == -2

    @pytest.mark.parametrize("freq", [697.0, 941.0, 1209.0, 1633.0])
    def test_range_invariant_on_full_scale_noise(self, freq: float) -> None:
        rng = random.Random(1234)
        r = Resonator(freq, 8000)
        for _ in range(2000):
            r.feed(rng.randint(-32768, 32767))
            assert abs(r.v2) <= 1 << 15
            assert abs(r.v3) <= 1 << 15

    def test_range_invariant_on_constant_extreme(self) -> None:
        r = Resonator(1633.0, 8000)
        for _ in range(500):
            r.feed(-32768)
            assert abs(r.v2) <= 1 << 15
            assert abs(r.v3) <= 1 << 15

    def test_reset_keeps_coefficient(self) -> None:
        r = Resonator(852.0, 8000)
        for s in (32767, -32768, 32767):
            r.feed(s)
        r.reset()
        assert (r.v2, r.v3, r.chunky) == (0, 0, 0)
        assert r.coeff == 51403


# ---------------------------------------------------------------------------
# ToneBank
# ---------------------------------------------------------------------------


class TestToneBank:
    def test_frequencies(self) -> None:
        bank = ToneBank(8000)
        assert [r.freq for r in bank.rows] == [697.0, 770.0, 852.0, 941.0]
        assert [c.freq for c in bank.cols] == [1209.0, 1336.0, 1477.0, 1633.0]

    def test_feed_reaches_all_resonators(self) -> None:
        bank = ToneBank(8000)
        bank.feed(1000)
        assert all(r.v3 == 1000 for r in bank.rows + bank.cols)

    def test_silence_gives_zero_energy(self) -> None:
        bank = ToneBank(8000)
        for _ in range(102):
            bank.feed(0)
        assert bank.results_row() == [0.0] * 4
        assert bank.results_col() == [0.0] * 4

    def test_digit_peaks_in_its_row_and_column(self) -> None:
        bank = ToneBank(8000)
        for s in tone("9", 102):
            bank.feed(s)
        rows = bank.results_row()
        cols = bank.results_col()
        assert rows.index(max(rows)) == 2
        assert cols.index(max(cols)) == 2

    def test_reset_all(self) -> None:
        bank = ToneBank(8000)
        for s in tone("1", 50):
            bank.feed(s)
        bank.reset()
        assert all((r.v2, r.v3, r.chunky) == (0, 0, 0) for r in bank.rows + bank.cols)

    def test_invalid_sample_rate(self) -> None:
        with pytest.raises(ConfigurationError):
            ToneBank(0)
