"""Per-block DTMF decision: signal level, twist, relative peak, total energy."""

from __future__ import annotations

from collections.abc import Sequence

from dtmfkit.config import (
    KEY_MATRIX,
    RELATIVE_PEAK_COL,
    RELATIVE_PEAK_ROW,
    THRESHOLD,
    TO_TOTAL_ENERGY,
    DTMFConfig,
)

_DEFAULT_CONFIG = DTMFConfig()


def _argmax(values: Sequence[float]) -> int:
    best = 0
    for i in range(1, len(values)):
        if values[i] > values[best]:
            best = i
    return best


def evaluate_block(
    row_energy: Sequence[float],
    col_energy: Sequence[float],
    energy: float,
    *,
    relax: bool = False,
    config: DTMFConfig | None = None,
) -> str | None:
    """Return the instantaneous (un-debounced) hit for one block.

    Args:
        row_energy: Resonator outputs for the four row frequencies.
        col_energy: Resonator outputs for the four column frequencies.
        energy: Sum of squared sample amplitudes over the block.
        relax: Use the relaxed twist tolerances.
        config: Twist parameters; defaults to ``DTMFConfig()``.

    Returns:
        The keypad symbol, or None when any test fails.
    """
    cfg = config or _DEFAULT_CONFIG
    normal_twist, reverse_twist = cfg.twists(relax)

    best_row = _argmax(row_energy)
    best_col = _argmax(col_energy)
    row_peak = row_energy[best_row]
    col_peak = col_energy[best_col]

    # Basic signal level test and the twist test
    if not (
        row_peak >= THRESHOLD
        and col_peak >= THRESHOLD
        and col_peak < row_peak * reverse_twist
        and row_peak < col_peak * normal_twist
    ):
        return None

    # Relative peak test
    for i in range(len(row_energy)):
        if i != best_row and row_energy[i] * RELATIVE_PEAK_ROW > row_peak:
            return None
    for i in range(len(col_energy)):
        if i != best_col and col_energy[i] * RELATIVE_PEAK_COL > col_peak:
            return None

    # ... and fraction of total energy test
    if row_peak + col_peak <= TO_TOTAL_ENERGY * energy:
        return None

    return KEY_MATRIX[(best_row << 2) + best_col]
