"""Small numeric helpers shared by the matchers."""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with .5 going up, unlike the built-in banker's rounding."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_score(value: float) -> int:
    return int(round_half_up(value))


def format_years(years: float) -> str:
    """Render 12.0 as '12' and 3.5 as '3.5'."""
    return f"{years:g}"
