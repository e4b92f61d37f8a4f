"""Hit/miss debounce state machine for DTMF digits.

Adapted from ETSI ES 201 235-3 V1.3.1 (2006-03). Each hit or miss is one
detection block (12.75ms with 102-sample blocks at 8kHz); the 40ms
reference is tunable with ``hits_to_begin`` and ``misses_to_end``.

Example with hits_to_begin=2, misses_to_end=3 (newest block on the right)::

    -------A  last_hit=A hits=0&1
    ------AA  hits=2 current=A misses=0       BEGIN A
    -----AA-  misses=1 last_hit=- hits=0
    ----AA--  misses=2
    ---AA---  misses=3 current=-              END A
    --AA---B  last_hit=B hits=0&1
    -AA---BC  last_hit=C hits=0&1
    AA---BCC  hits=2 current=C misses=0       BEGIN C

Beginning a digit is looked for whether or not one is already active,
because ``hits_to_begin`` may be smaller than ``misses_to_end`` and the
next digit can begin before the previous one is considered ended.
"""

from __future__ import annotations

import logging

from dtmfkit.config import BLOCK_SIZE, DEF_HITS_TO_BEGIN, DEF_MISSES_TO_END
from dtmfkit.dtmf.sink import DigitSink
from dtmfkit.errors import ConfigurationError

logger = logging.getLogger(__name__)


class Debouncer:
    """Turns per-block instantaneous hits into digit begin/end transitions."""

    def __init__(
        self,
        sink: DigitSink,
        *,
        hits_to_begin: int = DEF_HITS_TO_BEGIN,
        misses_to_end: int = DEF_MISSES_TO_END,
        block_size: int = BLOCK_SIZE,
    ) -> None:
        for name, value in (
            ("hits_to_begin", hits_to_begin),
            ("misses_to_end", misses_to_end),
            ("block_size", block_size),
        ):
            if value < 1:
                raise ConfigurationError(f"{name} must be at least 1, got {value}")
        self._sink = sink
        self._hits_to_begin = hits_to_begin
        self._misses_to_end = misses_to_end
        self._block_size = block_size

        self.hits = 0
        self.misses = 0
        self.last_hit: str | None = None
        self.current_digit: str | None = None

    def update(self, hit: str | None) -> str | None:
        """Feed one block's instantaneous hit and return the debounced digit."""
        if self.current_digit is not None:
            # We are in the middle of a digit already
            if hit != self.current_digit:
                self.misses += 1
                if self.misses == self._misses_to_end:
                    logger.debug("DTMF end %r", self.current_digit)
                    self.current_digit = None
            else:
                self.misses = 0
                self._sink.extend(self._block_size)

        if hit != self.last_hit:
            self.last_hit = hit
            self.hits = 0

        if hit is not None and hit != self.current_digit:
            self.hits += 1
            if self.hits == self._hits_to_begin:
                logger.debug("DTMF begin %r", hit)
                self._sink.begin(hit, self._hits_to_begin * self._block_size)
                self.current_digit = hit
                self.misses = 0

        return self.current_digit

    def reset(self) -> None:
        self.hits = 0
        self.misses = 0
        self.last_hit = None
        self.current_digit = None
