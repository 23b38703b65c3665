"""Rounding modes for scale-reducing money operations."""

from enum import StrEnum

__all__ = ["RoundingMode"]


class RoundingMode(StrEnum):
    """How to discard digits when an operation reduces the scale.

    Examples for rounding to an integer:

        ===========  ====  ====  ====  ====  =====
        Mode         5.5   2.5   1.6   -1.1  -2.5
        ===========  ====  ====  ====  ====  =====
        UP           6     3     2     -2    -3
        DOWN         5     2     1     -1    -2
        CEILING      6     3     2     -1    -2
        FLOOR        5     2     1     -2    -3
        HALF_UP      6     3     2     -1    -3
        HALF_DOWN    5     2     2     -1    -2
        HALF_EVEN    6     2     2     -1    -2
        UNNECESSARY  fail  fail  fail  fail  fail
        ===========  ====  ====  ====  ====  =====
    """

    UP = "UP"  # Away from zero
    DOWN = "DOWN"  # Toward zero
    CEILING = "CEILING"  # Toward positive infinity
    FLOOR = "FLOOR"  # Toward negative infinity
    HALF_UP = "HALF_UP"  # Nearest, ties away from zero
    HALF_DOWN = "HALF_DOWN"  # Nearest, ties toward zero
    HALF_EVEN = "HALF_EVEN"  # Nearest, ties to even (banker's rounding)
    UNNECESSARY = "UNNECESSARY"  # Exact result required
