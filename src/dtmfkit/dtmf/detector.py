"""DTMF detection session over a raw int16 sample stream."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from dtmfkit.config import BLOCK_SIZE, DEFAULT_SAMPLE_RATE, DTMFConfig
from dtmfkit.dtmf.debounce import Debouncer
from dtmfkit.dtmf.evaluator import evaluate_block
from dtmfkit.dtmf.goertzel import ToneBank
from dtmfkit.dtmf.sink import DigitBuffer, DigitSink

logger = logging.getLogger(__name__)


class DigitDetector:
    """One detection session: tone bank, block accumulator and debouncer.

    Samples are consumed in blocks of ``BLOCK_SIZE``. A partial block is
    kept across calls, so splitting a stream into arbitrary buffers gives
    the same result as processing it in one piece. Calls for one session
    must be serialized by the caller; separate sessions share nothing.

    Parameters:
        sample_rate: Sample rate of the stream in Hz. Fixed for the session.
        config: Debounce and twist parameters.
        sink: Receives recognized digits. A ``DigitBuffer`` is created
            when omitted.
    """

    def __init__(
        self,
        sample_rate: int = DEFAULT_SAMPLE_RATE,
        config: DTMFConfig | None = None,
        sink: DigitSink | None = None,
    ) -> None:
        self._config = config or DTMFConfig()
        self._sample_rate = sample_rate
        self._bank = ToneBank(sample_rate)
        self._sink: DigitSink = sink if sink is not None else DigitBuffer()
        self._debouncer = Debouncer(
            self._sink,
            hits_to_begin=self._config.hits_to_begin,
            misses_to_end=self._config.misses_to_end,
            block_size=BLOCK_SIZE,
        )

        # Block accumulator
        self.energy = 0.0
        self.current_sample = 0

        logger.debug(
            "DTMF session created: sample_rate=%d hits_to_begin=%d misses_to_end=%d",
            sample_rate,
            self._config.hits_to_begin,
            self._config.misses_to_end,
        )

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @property
    def config(self) -> DTMFConfig:
        return self._config

    @property
    def sink(self) -> DigitSink:
        return self._sink

    @property
    def bank(self) -> ToneBank:
        return self._bank

    @property
    def debouncer(self) -> Debouncer:
        return self._debouncer

    @property
    def current_digit(self) -> str | None:
        return self._debouncer.current_digit

    def process(
        self,
        samples: Sequence[int],
        count: int | None = None,
        *,
        relax: bool = False,
        squelch: bool = False,
    ) -> str | None:
        """Feed int16 samples and return the current debounced digit.

        Args:
            samples: Signed 16-bit PCM samples, mono.
            count: Number of leading samples to consume (default: all).
            relax: Use the relaxed twist tolerances for blocks completed
                during this call.
            squelch: Reserved for muting logic outside the detector; it
                does not affect detection.

        Returns:
            The active digit after the whole input, or None. Digits that
            began and ended within this call are only visible in the sink.
        """
        if count is None:
            count = len(samples)
        elif not 0 <= count <= len(samples):
            raise ValueError(f"count must be between 0 and {len(samples)}, got {count}")

        bank_feed = self._bank.feed
        sample = 0
        while sample < count:
            # Consume up to the end of the current block
            limit = min(count, sample + (BLOCK_SIZE - self.current_sample))
            energy = self.energy
            for j in range(sample, limit):
                samp = samples[j]
                energy += samp * samp
                bank_feed(samp)
            self.energy = energy
            self.current_sample += limit - sample
            sample = limit
            if self.current_sample < BLOCK_SIZE:
                break
            self._end_block(relax)

        return self._debouncer.current_digit

    def _end_block(self, relax: bool) -> None:
        hit = evaluate_block(
            self._bank.results_row(),
            self._bank.results_col(),
            self.energy,
            relax=relax,
            config=self._config,
        )
        self._debouncer.update(hit)

        # Reinitialise for the next block
        self._bank.reset()
        self.energy = 0.0
        self.current_sample = 0

    def reset(self) -> None:
        """Discard the partial block and return to idle. The sink is untouched."""
        self._bank.reset()
        self._debouncer.reset()
        self.energy = 0.0
        self.current_sample = 0
