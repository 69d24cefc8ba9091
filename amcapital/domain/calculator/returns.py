"""Investment return calculator.

Closed-form acquisition costs, recurring charges, yields, loan cash-flow,
ROI and payback period for one configuration. Assumes a validated
configuration and raises nothing of its own.
"""

from __future__ import annotations

from amcapital.core.constants import ReferenceTables, get_reference_tables
from amcapital.core.financial import amortized_payment, round_half_up
from amcapital.core.logging import get_logger
from amcapital.domain.models.market import LongTermMarketData, ShortTermMarketData
from amcapital.domain.models.result import CalculationResult
from amcapital.domain.models.simulation import ExploitationMode, SimulationConfig

log = get_logger(__name__)


def _architect_rate(config: SimulationConfig, tables: ReferenceTables) -> float:
    if config.exploitation_mode is ExploitationMode.LONG_TERM:
        return tables.fees.architect_long_term
    return tables.fees.architect_short_term


def total_investment_cost(config: SimulationConfig, tables: ReferenceTables | None = None) -> float:
    """Price + notary + commission + architect fees, unrounded."""
    tables = tables or get_reference_tables()
    fees = tables.fees
    return (
        config.price
        + config.price * fees.notary_rate
        + config.price * fees.commission_rate
        + config.surface * _architect_rate(config, tables)
    )


def additional_short_term_fees(
    config: SimulationConfig,
    market_data: LongTermMarketData | ShortTermMarketData | None,
) -> float:
    """Market-reported short-term fees spread over 12 months."""
    if config.exploitation_mode is not ExploitationMode.SHORT_TERM:
        return 0.0
    if not isinstance(market_data, ShortTermMarketData) or market_data.fees is None:
        return 0.0
    return (market_data.fees.total or 0.0) / 12


def calculate_investment_returns(
    config: SimulationConfig,
    monthly_revenue: float,
    market_data: LongTermMarketData | ShortTermMarketData | None = None,
    tables: ReferenceTables | None = None,
) -> CalculationResult:
    """Compute every profitability metric for a configuration.

    Args:
        config: Validated simulation configuration
        monthly_revenue: Revenue in €/month, as resolved
        market_data: Market payload, only read for short-term fees
        tables: Reference tables (current bundle by default)

    Returns:
        Rounded ``CalculationResult``; cash-flow and ROI keep their sign
    """
    tables = tables or get_reference_tables()
    fees = tables.fees
    financing = tables.financing
    is_long_term = config.exploitation_mode is ExploitationMode.LONG_TERM

    # 1. Acquisition
    notary_fees = config.price * fees.notary_rate
    commission_fees = config.price * fees.commission_rate
    architect_fees = config.surface * _architect_rate(config, tables)
    total_costs = config.price + notary_fees + commission_fees + architect_fees

    # 2. Recurring monthly charges
    management_fees = monthly_revenue * fees.management_rate
    vacancy_loss = monthly_revenue * fees.vacancy_rate if is_long_term else 0.0
    monthly_insurance = fees.insurance_annual / 12
    monthly_property_tax = (config.price * fees.property_tax_rate) / 12
    monthly_maintenance = (config.price * fees.maintenance_rate) / 12
    additional_fees = additional_short_term_fees(config, market_data)

    monthly_charges = (
        management_fees
        + vacancy_loss
        + monthly_insurance
        + monthly_property_tax
        + monthly_maintenance
        + additional_fees
    )
    taxes_and_insurance = monthly_insurance + monthly_property_tax

    # 3. Yields
    annual_rent = monthly_revenue * 12
    annual_net_rent = (monthly_revenue - monthly_charges) * 12
    gross_return = (annual_rent / total_costs) * 100
    net_return = (annual_net_rent / total_costs) * 100

    # 4. Financing
    monthly_loan_payment = amortized_payment(
        total_costs * financing.loan_ratio,
        financing.duration_years,
        financing.mortgage_rate,
    )
    cashflow = monthly_revenue - monthly_charges - monthly_loan_payment

    # 5. Equity returns
    initial_equity = total_costs * financing.equity_ratio
    roi = (cashflow * 12 / initial_equity) * 100
    payback_period = initial_equity / max(1.0, (monthly_revenue - monthly_charges) * 12)

    log.debug(
        "returns_calculated",
        mode=config.exploitation_mode.value,
        monthly_revenue=monthly_revenue,
        gross_return=gross_return,
        cashflow=cashflow,
    )

    return CalculationResult(
        monthly_rent=round_half_up(monthly_revenue),
        gross_return=round_half_up(gross_return, 2),
        net_return=round_half_up(net_return, 2),
        cashflow=round_half_up(cashflow),
        total_costs=round_half_up(total_costs),
        notary_fees=round_half_up(notary_fees),
        commission_fees=round_half_up(commission_fees),
        architect_fees=round_half_up(architect_fees),
        monthly_charges=round_half_up(monthly_charges),
        taxes_and_insurance=round_half_up(taxes_and_insurance),
        management_fees=round_half_up(management_fees),
        vacancy_loss=round_half_up(vacancy_loss),
        roi=round_half_up(roi, 2),
        payback_period=round_half_up(payback_period, 2),
    )
