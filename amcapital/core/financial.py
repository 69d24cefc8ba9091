"""Financial calculation functions.

Loan annuity, amortization schedule and rounding helpers.
"""

from __future__ import annotations

import math
from typing import Any

import numpy_financial as npf


def round_half_up(value: float, decimals: int = 0) -> float | int:
    """Round with ties going toward +infinity.

    Args:
        value: Number to round
        decimals: Decimal places to keep

    Returns:
        An ``int`` when ``decimals`` is 0, otherwise a float
    """
    if decimals == 0:
        return int(math.floor(value + 0.5))
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def amortized_payment(
    principal: float,
    years: int,
    annual_rate: float,
) -> float:
    """Calculate the monthly payment of a fixed-rate amortizing loan.

    Args:
        principal: Loan amount in €
        years: Loan term in years
        annual_rate: Annual interest rate as a fraction (e.g., 0.048 for 4.8%)

    Returns:
        Monthly payment amount in €
    """
    n_payments = int(years * 12)
    if principal <= 0 or n_payments <= 0:
        return 0.0

    monthly_rate = annual_rate / 12.0

    if monthly_rate == 0:
        return principal / n_payments

    return float(-npf.pmt(monthly_rate, n_payments, principal))


def generate_amortization_schedule(
    principal: float,
    years: int,
    annual_rate: float,
) -> dict[str, Any]:
    """Generate the month-by-month amortization table of a loan.

    Args:
        principal: Loan amount in €
        years: Loan term in years
        annual_rate: Annual interest rate as a fraction

    Returns:
        Dict with parallel lists ``month``, ``opening_balance``, ``interest``,
        ``principal``, ``payment``, ``closing_balance`` plus ``monthly_payment``,
        ``total_interest`` and ``n_months``.
    """
    n_months = int(years * 12)
    if principal <= 0 or n_months <= 0:
        return {
            "month": [],
            "opening_balance": [],
            "interest": [],
            "principal": [],
            "payment": [],
            "closing_balance": [],
            "monthly_payment": 0.0,
            "total_interest": 0.0,
            "n_months": 0,
        }

    monthly_rate = annual_rate / 12.0
    payment = amortized_payment(principal, years, annual_rate)

    opening, interests, principals, closing = [], [], [], []
    balance = principal

    for _ in range(n_months):
        interest = balance * monthly_rate
        principal_part = payment - interest
        new_balance = max(0.0, balance - principal_part)

        opening.append(round(balance, 2))
        interests.append(round(interest, 2))
        principals.append(round(principal_part, 2))
        closing.append(round(new_balance, 2))

        balance = new_balance

    return {
        "month": list(range(1, n_months + 1)),
        "opening_balance": opening,
        "interest": interests,
        "principal": principals,
        "payment": [round(payment, 2)] * n_months,
        "closing_balance": closing,
        "monthly_payment": payment,
        "total_interest": payment * n_months - principal,
        "n_months": n_months,
    }
