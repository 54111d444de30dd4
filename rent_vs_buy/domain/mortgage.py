"""Fixed-rate mortgage math: payment formula and amortization simulation"""

import math

from rent_vs_buy.domain.models import AmortizationSummary


def monthly_mortgage_payment(principal: float, annual_rate_pct: float, term_years: int) -> float:
    """
    Standard fixed-rate amortization payment.

        M = P * r(1+r)^n / ((1+r)^n - 1)

    where r = annual_rate / 100 / 12 and n = years * 12.
    A zero rate spreads the principal evenly over n payments. (1+r)^n and
    (1+r)^n - 1 go through log1p/expm1 so tiny rates do not collapse to 1.
    """
    n = term_years * 12
    r = annual_rate_pct / 100 / 12
    if r == 0:
        return principal / n
    exponent = n * math.log1p(r)
    return principal * r * math.exp(exponent) / math.expm1(exponent)


def simulate_amortization(
    principal: float,
    annual_rate_pct: float,
    payment: float,
    months: int,
) -> AmortizationSummary:
    """
    Walk the amortization schedule month by month.

    Each month:
    - interest = balance * monthly rate
    - principal portion = payment - interest, accumulated into principal repaid

    Stops after `months` or after the month in which the balance drops below
    zero. The overshooting month is still counted, so principal repaid can
    slightly exceed the original loan when the horizon outlasts the term.
    """
    r = annual_rate_pct / 100 / 12
    balance = principal
    principal_repaid = 0.0
    simulated = 0

    for _ in range(months):
        interest = balance * r
        principal_paid = payment - interest
        principal_repaid += principal_paid
        balance -= principal_paid
        simulated += 1
        if balance < 0:
            break

    return AmortizationSummary(
        principal_repaid=principal_repaid,
        remaining_balance=balance,
        months_simulated=simulated,
    )
