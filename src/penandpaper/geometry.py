"""Heading math: angle conversion, normalization and rounding."""

import math

# 0 = right, 90 = down, 180 = left, 270 = up (screen y grows downward)
FULL_TURN = 360.0


def to_radians(deg: float) -> float:
    """Convert degrees to radians in [0, 2pi)."""
    return (deg * math.pi / 180) % (2 * math.pi)


def to_degrees(rad: float) -> float:
    """Convert radians to degrees in [0, 360)."""
    return (rad * 180 / math.pi) % FULL_TURN


def quantize(value: float) -> float:
    """Round to 3 decimals so repeated small moves don't drift."""
    return round(value, 3)


def normalize_heading(deg: float) -> float:
    # rounding 359.9996 gives 360.0, so wrap again afterwards
    return quantize(deg % FULL_TURN) % FULL_TURN


def round_half_up(value: float) -> int:
    """Pixel rounding; ties go toward +inf."""
    return math.floor(value + 0.5)
