"""Numeric helpers shared by the calculators."""

import math


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round to ``decimals`` places with halves rounded up.

    Unlike ``round``/``np.round`` (halves to even), 0.625 rounds to 0.63 and
    2.5 rounds to 3.

    Formula:
        floor(value * 10**decimals + 0.5) / 10**decimals
    """
    factor = 10**decimals
    return math.floor(value * factor + 0.5) / factor
