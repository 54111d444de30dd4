"""Rent vs buy projection engine - core business logic"""

import math
from dataclasses import astuple
from typing import List

from rent_vs_buy.domain.models import (
    BuyProjection,
    ProjectionInput,
    ProjectionResult,
    Recommendation,
)
from rent_vs_buy.domain.exceptions import DegenerateResultError, InvalidInputError
from rent_vs_buy.domain.mortgage import monthly_mortgage_payment, simulate_amortization


def _require_number(field: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(field, "must be a number")
    if not math.isfinite(value):
        raise InvalidInputError(field, "must be a finite number")
    return value


def _require_years(field: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(field, "must be a whole number of years")
    if value <= 0:
        raise InvalidInputError(field, "must be greater than 0")
    return value


def validate_input(projection_input: ProjectionInput) -> None:
    """
    Reject inputs that would make the projection meaningless.

    Raises:
        InvalidInputError: naming the first offending field
    """
    if _require_number("monthly_rent", projection_input.monthly_rent) <= 0:
        raise InvalidInputError("monthly_rent", "must be greater than 0")
    if _require_number("home_price", projection_input.home_price) <= 0:
        raise InvalidInputError("home_price", "must be greater than 0")

    down_payment_pct = _require_number("down_payment_pct", projection_input.down_payment_pct)
    if not 0 <= down_payment_pct <= 100:
        raise InvalidInputError("down_payment_pct", "must be between 0 and 100")

    if _require_number("mortgage_rate", projection_input.mortgage_rate) < 0:
        raise InvalidInputError("mortgage_rate", "must not be negative")
    if _require_number("property_tax_rate", projection_input.property_tax_rate) < 0:
        raise InvalidInputError("property_tax_rate", "must not be negative")
    # -100% or worse would wipe out (or invert) the home's value
    if _require_number("appreciation_rate", projection_input.appreciation_rate) <= -100:
        raise InvalidInputError("appreciation_rate", "must be greater than -100")

    _require_years("amortization_years", projection_input.amortization_years)
    _require_years("horizon_years", projection_input.horizon_years)


def calculate_total_rent(monthly_rent: float, horizon_years: int) -> float:
    """Rent paid over the horizon. No rent increases are modelled."""
    return monthly_rent * 12 * horizon_years


def calculate_buy_projection(projection_input: ProjectionInput) -> BuyProjection:
    """
    Net cost of buying over the horizon.

    net cost = down payment + mortgage payments + property tax
               - appreciation gain - principal repaid

    Mortgage payments are counted for every month of the horizon, even when
    the amortization term ends earlier. Property tax is flat on the purchase
    price.
    """
    home_price = projection_input.home_price
    years = projection_input.horizon_years
    months = years * 12

    down_payment = home_price * (projection_input.down_payment_pct / 100)
    mortgage_amount = home_price - down_payment
    monthly_payment = monthly_mortgage_payment(
        mortgage_amount,
        projection_input.mortgage_rate,
        projection_input.amortization_years,
    )
    total_mortgage_payments = monthly_payment * months
    property_tax = home_price * (projection_input.property_tax_rate / 100) * years
    future_home_value = home_price * (1 + projection_input.appreciation_rate / 100) ** years

    schedule = simulate_amortization(
        mortgage_amount,
        projection_input.mortgage_rate,
        monthly_payment,
        months,
    )

    net_cost = (
        down_payment
        + total_mortgage_payments
        + property_tax
        - (future_home_value - home_price)
        - schedule.principal_repaid
    )

    return BuyProjection(
        net_cost=net_cost,
        down_payment=down_payment,
        total_mortgage_payments=total_mortgage_payments,
        property_tax=property_tax,
        future_home_value=future_home_value,
        principal_repaid=schedule.principal_repaid,
        mortgage_amount=mortgage_amount,
        monthly_payment=monthly_payment,
        remaining_balance=schedule.remaining_balance,
    )


def determine_recommendation(
    total_rent_cost: float,
    buy_net_cost: float,
    tie_tolerance: float = 0.0,
) -> Recommendation:
    """
    Pick the cheaper option.

    With the default tolerance of 0 the costs must be exactly equal to tie,
    which rarely happens with computed floats. A positive tolerance treats
    any difference within that many currency units as a tie.
    """
    if abs(total_rent_cost - buy_net_cost) <= tie_tolerance:
        return Recommendation.EQUAL
    elif total_rent_cost < buy_net_cost:
        return Recommendation.RENT
    else:
        return Recommendation.BUY


def collect_warnings(projection_input: ProjectionInput) -> List[str]:
    """Flag input combinations where the simplified model is known to be off"""
    warnings = []
    if projection_input.horizon_years > projection_input.amortization_years:
        warnings.append(
            f"Horizon of {projection_input.horizon_years} years exceeds the "
            f"{projection_input.amortization_years}-year amortization term; "
            "mortgage payments are counted for every month of the horizon"
        )
    return warnings


def compute_projection(projection_input: ProjectionInput, tie_tolerance: float = 0.0) -> ProjectionResult:
    """
    Main entry point: validate inputs, project rent and buy costs, recommend.

    Raises:
        InvalidInputError: inputs out of range or non-numeric
        DegenerateResultError: a computed figure overflowed or is not finite
    """
    validate_input(projection_input)
    if not math.isfinite(tie_tolerance) or tie_tolerance < 0:
        raise InvalidInputError("tie_tolerance", "must be a non-negative finite number")

    try:
        total_rent_cost = calculate_total_rent(projection_input.monthly_rent, projection_input.horizon_years)
        buy = calculate_buy_projection(projection_input)
    except (OverflowError, ZeroDivisionError) as e:
        raise DegenerateResultError(f"Projection could not be computed: {e}") from e

    if not math.isfinite(total_rent_cost) or not all(math.isfinite(v) for v in astuple(buy)):
        raise DegenerateResultError("Projection produced a non-finite figure")

    return ProjectionResult(
        total_rent_cost=total_rent_cost,
        buy=buy,
        recommendation=determine_recommendation(total_rent_cost, buy.net_cost, tie_tolerance),
        warnings=tuple(collect_warnings(projection_input)),
    )
