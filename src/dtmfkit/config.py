"""DTMF detection configuration and calibrated constants."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Basic DTMF (AT&T) specs:
#   minimum tone on = 40ms, minimum tone off = 50ms
#   normal twist <= 8dB accepted, reverse twist <= 4dB accepted
#   S/N >= 15dB will detect OK, attenuation <= 26dB will detect OK
#   frequency tolerance +-1.5% will detect, +-3.5% will reject

DEFAULT_SAMPLE_RATE = 8000

BLOCK_SIZE = 102
"""Goertzel block length in samples (12.75ms at 8kHz).

THRESHOLD, RELATIVE_PEAK_* and TO_TOTAL_ENERGY are calibrated against this
block length. Changing it means re-deriving all of them.
"""

THRESHOLD = 8.0e7

RELATIVE_PEAK_ROW = 6.3  # 8dB
RELATIVE_PEAK_COL = 6.3  # 8dB
TO_TOTAL_ENERGY = 42.0

MAX_DIGITS = 128
"""Default capacity of the digit buffer."""

ROW_FREQUENCIES = (697.0, 770.0, 852.0, 941.0)
COL_FREQUENCIES = (1209.0, 1336.0, 1477.0, 1633.0)

KEY_MATRIX = "123A456B789C*0#D"
"""Keypad layout, row-major: ``KEY_MATRIX[row * 4 + col]``."""

DEF_NORMAL_TWIST = 6.31  # 8.0dB
DEF_REVERSE_TWIST = 2.51  # 4.01dB
DEF_RELAX_NORMAL_TWIST = 6.31  # 8.0dB
DEF_RELAX_REVERSE_TWIST = 3.98  # 6.0dB

DEF_HITS_TO_BEGIN = 2
DEF_MISSES_TO_END = 3


class DTMFConfig(BaseModel):
    """Tunable parameters shared by detection sessions.

    Each hit/miss is one block (12.75ms at 8kHz), so the defaults require
    ~25ms of valid tone to begin a digit and ~38ms of absence to end it.
    Instances are immutable; build a new one rather than changing a
    config that sessions are already using.
    """

    model_config = ConfigDict(frozen=True)

    hits_to_begin: int = Field(default=DEF_HITS_TO_BEGIN, ge=1)
    """Successive hit blocks needed to consider the begin of a digit."""

    misses_to_end: int = Field(default=DEF_MISSES_TO_END, ge=1)
    """Successive miss blocks needed to consider the end of a digit."""

    normal_twist: float = Field(default=DEF_NORMAL_TWIST, gt=1.0, le=100.0)
    reverse_twist: float = Field(default=DEF_REVERSE_TWIST, gt=1.0, le=100.0)
    relax_normal_twist: float = Field(default=DEF_RELAX_NORMAL_TWIST, gt=1.0, le=100.0)
    relax_reverse_twist: float = Field(default=DEF_RELAX_REVERSE_TWIST, gt=1.0, le=100.0)

    def twists(self, relax: bool = False) -> tuple[float, float]:
        """Return ``(normal_twist, reverse_twist)`` for the strict or relaxed set."""
        if relax:
            return self.relax_normal_twist, self.relax_reverse_twist
        return self.normal_twist, self.reverse_twist
