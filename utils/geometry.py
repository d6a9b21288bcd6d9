"""Rounding and centering arithmetic used by the section builders."""
import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going up (2.5 -> 3, -2.5 -> -2).

    Python's round() uses banker's rounding; the page geometry was tuned with
    ties rounding upwards, so every derived pixel constant goes through here.
    """
    return math.floor(value + 0.5)


def centered(outer: float, inner: float) -> int:
    """Left offset that centers a box of width ``inner`` inside ``outer``."""
    return round_half_up((outer - inner) / 2)
