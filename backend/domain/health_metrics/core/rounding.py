"""Rounding helpers shared by calculation, projection and display.

Python's round() and format() resolve exact ties to the even digit
(round(2758.5) == 2758, f"{24.25:.1f}" == "24.2"). Health figures round
ties upwards instead.
"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal

_TENTH = Decimal("0.1")
# Wide enough for any finite float quantized to tenths.
_CONTEXT = Context(prec=400)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up.

    Example:
        >>> round_half_up(2758.5)
        2759
    """
    return int(math.floor(value + 0.5))


def round_to_tenth(value: float) -> float:
    """Round to one decimal place, ties away from zero.

    The exact binary value is rounded, so only values stored exactly on
    a tie (24.25, 70.75) are pushed upwards.

    Example:
        >>> round_to_tenth(24.25)
        24.3
    """
    return float(Decimal(value).quantize(_TENTH, rounding=ROUND_HALF_UP, context=_CONTEXT))
