"""Rental income taxation: micro regime vs. réel regime."""

from __future__ import annotations

from amcapital.core.financial import round_half_up
from amcapital.domain.models.report import TaxCalculation, TaxComparison
from amcapital.domain.models.simulation import ExploitationMode

DEFAULT_MARGINAL_RATE = 0.30

# Flat allowance of the micro regime
MICRO_ABATEMENT = {
    ExploitationMode.LONG_TERM: 0.30,
    ExploitationMode.SHORT_TERM: 0.50,
}


def _effective_rate(tax_amount: float, annual_rent: float) -> float:
    if annual_rent <= 0:
        return 0.0
    return round_half_up(tax_amount / annual_rent * 100, 2)


def calculate_taxes(
    annual_rent: float,
    annual_charges: float,
    marginal_rate: float = DEFAULT_MARGINAL_RATE,
    mode: ExploitationMode = ExploitationMode.LONG_TERM,
) -> TaxComparison:
    """Tax the same rental income under both regimes.

    Args:
        annual_rent: Gross annual rent in €
        annual_charges: Deductible annual charges in €
        marginal_rate: Marginal income tax rate as a fraction
        mode: Exploitation mode, sets the micro allowance

    Returns:
        Both calculations and the regime leaving the higher net income
    """
    mode = ExploitationMode(mode)

    micro_taxable = annual_rent * (1 - MICRO_ABATEMENT[mode])
    micro_tax = micro_taxable * marginal_rate
    micro_net = annual_rent - micro_tax

    reel_taxable = max(0.0, annual_rent - annual_charges)
    reel_tax = reel_taxable * marginal_rate
    reel_net = annual_rent - annual_charges - reel_tax

    micro = TaxCalculation(
        regime="micro",
        taxable_income=round_half_up(micro_taxable),
        tax_amount=round_half_up(micro_tax),
        net_income_after_tax=round_half_up(micro_net),
        effective_rate=_effective_rate(micro_tax, annual_rent),
    )
    reel = TaxCalculation(
        regime="reel",
        taxable_income=round_half_up(reel_taxable),
        tax_amount=round_half_up(reel_tax),
        net_income_after_tax=round_half_up(reel_net),
        effective_rate=_effective_rate(reel_tax, annual_rent),
    )

    return TaxComparison(
        micro=micro,
        reel=reel,
        recommendation="reel" if reel_net > micro_net else "micro",
    )
