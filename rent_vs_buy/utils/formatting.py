"""Currency formatting utilities"""

import math


def round_half_away(amount: float) -> int:
    """Round to the nearest whole unit, halves away from zero (2.5 → 3, -2.5 → -3)"""
    return int(math.copysign(math.floor(abs(amount) + 0.5), amount))


def format_currency(amount: float, symbol: str = "$") -> str:
    """
    Format an amount as whole currency units with thousands separators.

    Examples:
        240000      → "$240,000"
        671958.19   → "$671,958"
        -1234.4     → "$-1,234"
    """
    return f"{symbol}{round_half_away(amount):,}"
