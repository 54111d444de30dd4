"""Chart data for the rent vs buy bar comparison"""

import math
from typing import Callable, Optional

from rent_vs_buy.domain.models import ChartBar, ChartData


def bar_height_pct(value: float, max_value: float) -> int:
    """
    Height of a bar as a whole percentage of the tallest bar.

    Rounds half up. Bars are clamped to 0 rather than scaled against a
    negative maximum: a non-positive value, or a chart whose larger value is
    not positive (both zero, or both negative), renders at 0.
    """
    if max_value <= 0 or value <= 0:
        return 0
    return int(math.floor(value / max_value * 100 + 0.5))


def build_chart_data(
    rent_cost: float,
    buy_cost: float,
    value_formatter: Optional[Callable[[float], str]] = None,
) -> ChartData:
    """
    Build the two-bar comparison, scaled to the larger of the two costs.

    Args:
        rent_cost: Total rent over the horizon
        buy_cost: Net buy cost over the horizon
        value_formatter: Optional callable producing each bar's value label

    Returns:
        ChartData with a "Rent" bar followed by a "Buy" bar
    """
    max_value = max(rent_cost, buy_cost)

    bars = tuple(
        ChartBar(
            label=label,
            value=value,
            height_pct=bar_height_pct(value, max_value),
            value_label=value_formatter(value) if value_formatter else "",
        )
        for label, value in (("Rent", rent_cost), ("Buy", buy_cost))
    )

    return ChartData(bars=bars, max_value=max_value)
