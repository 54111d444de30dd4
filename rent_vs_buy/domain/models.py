"""Domain models - pure Python dataclasses representing projection values"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class Recommendation(str, Enum):
    """Outcome of comparing total rent cost with net buy cost"""

    RENT = "rent"
    BUY = "buy"
    EQUAL = "equal"


@dataclass(frozen=True)
class ProjectionInput:
    """Financial inputs for one rent vs buy comparison (rates in percent)"""

    monthly_rent: float
    home_price: float
    down_payment_pct: float
    mortgage_rate: float  # annual
    amortization_years: int
    property_tax_rate: float  # annual, of purchase price
    appreciation_rate: float  # annual, may be negative
    horizon_years: int


@dataclass(frozen=True)
class AmortizationSummary:
    """Outcome of simulating a loan month by month"""

    principal_repaid: float
    remaining_balance: float
    months_simulated: int


@dataclass(frozen=True)
class BuyProjection:
    """Cost breakdown of buying over the horizon"""

    net_cost: float
    down_payment: float
    total_mortgage_payments: float
    property_tax: float
    future_home_value: float
    principal_repaid: float
    mortgage_amount: float
    monthly_payment: float
    remaining_balance: float


@dataclass(frozen=True)
class ProjectionResult:
    """Output of a projection"""

    total_rent_cost: float
    buy: BuyProjection
    recommendation: Recommendation
    warnings: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ChartBar:
    """Single labelled bar, height as a percentage of the tallest bar"""

    label: str
    value: float
    height_pct: int
    value_label: str = ""


@dataclass(frozen=True)
class ChartData:
    """Two comparable magnitudes ready for any renderer"""

    bars: Tuple[ChartBar, ...]
    max_value: float
