"""Simulation service.

Runs the resolver and the calculator for one configuration and wraps the
result with report metadata. Also compares both exploitation modes.
"""

from __future__ import annotations

import secrets
import string
from datetime import datetime, timezone
from typing import Any, Callable, Mapping

from amcapital.core.constants import ReferenceTables, get_reference_tables
from amcapital.core.financial import round_half_up
from amcapital.core.logging import bind_context, clear_context, get_logger
from amcapital.core.validation import build_simulation_config
from amcapital.domain.calculator.recommendation import get_recommendation
from amcapital.domain.calculator.resolver import resolve_monthly_revenue
from amcapital.domain.calculator.returns import calculate_investment_returns
from amcapital.domain.models.market import LongTermMarketData, ShortTermMarketData
from amcapital.domain.models.report import (
    ComparisonDifference,
    ComparisonResult,
    ReturnSummary,
    SimulationReport,
)
from amcapital.domain.models.result import CalculationResult
from amcapital.domain.models.simulation import ExploitationMode, SimulationConfig

log = get_logger(__name__)

REPORT_ID_ALPHABET = string.ascii_uppercase + string.digits
REPORT_ID_LENGTH = 8

# Net-return gap (points) above which one mode is preferred
COMPARISON_THRESHOLD = 1.0


def generate_report_id(length: int = REPORT_ID_LENGTH) -> str:
    return "".join(secrets.choice(REPORT_ID_ALPHABET) for _ in range(length))


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def calculate(
    config: SimulationConfig,
    market_data: LongTermMarketData | ShortTermMarketData | None = None,
    tables: ReferenceTables | None = None,
) -> CalculationResult:
    """Resolver then calculator, without report metadata."""
    tables = tables or get_reference_tables()
    resolved = resolve_monthly_revenue(config, market_data, tables)
    return calculate_investment_returns(config, resolved.monthly_revenue, market_data, tables)


def simulate_investment(
    config: SimulationConfig,
    market_data: LongTermMarketData | ShortTermMarketData | None = None,
    *,
    tables: ReferenceTables | None = None,
    clock: Callable[[], datetime] = _utcnow,
) -> SimulationReport:
    """Simulate one configuration.

    Args:
        config: Validated simulation configuration
        market_data: Optional market payload for the configuration's mode
        tables: Reference tables, read once for the whole run
        clock: Source of the report timestamp

    Returns:
        Report with the calculation, its data source and a recommendation
    """
    tables = tables or get_reference_tables()
    report_id = generate_report_id()

    bind_context(report_id=report_id)
    try:
        resolved = resolve_monthly_revenue(config, market_data, tables)
        result = calculate_investment_returns(config, resolved.monthly_revenue, market_data, tables)
    finally:
        clear_context("report_id")

    report = SimulationReport(
        report_id=report_id,
        generated_at=clock(),
        config=config,
        result=result,
        data_source=resolved.source,
        recommendation=get_recommendation(result.gross_return),
        market_data=market_data,
    )

    log.info(
        "simulation_completed",
        report_id=report.report_id,
        city=config.city,
        mode=config.exploitation_mode.value,
        source=resolved.source.value,
        monthly_rent=result.monthly_rent,
        gross_return=result.gross_return,
        cashflow=result.cashflow,
    )
    return report


def simulate_from_input(
    data: Mapping[str, Any],
    market_service: Any = None,
) -> SimulationReport:
    """Validate a raw input, fetch market data if a service is given, simulate.

    Raises:
        InvalidConfigurationError: If the input fails validation
    """
    config = build_simulation_config(data)
    market_data = market_service.get_market_data(config) if market_service is not None else None
    return simulate_investment(config, market_data)


def calculate_comparison(
    config: SimulationConfig,
    long_term_data: LongTermMarketData | None = None,
    short_term_data: ShortTermMarketData | None = None,
    tables: ReferenceTables | None = None,
) -> ComparisonResult:
    """Compare long-term and short-term exploitation of the same property."""
    tables = tables or get_reference_tables()

    long_config = config.model_copy(update={"exploitation_mode": ExploitationMode.LONG_TERM})
    short_config = config.model_copy(update={"exploitation_mode": ExploitationMode.SHORT_TERM})

    long_result = calculate(long_config, long_term_data, tables)
    short_result = calculate(short_config, short_term_data, tables)

    net_return_diff = short_result.net_return - long_result.net_return
    if net_return_diff > COMPARISON_THRESHOLD:
        recommendation = "short_term"
    elif net_return_diff < -COMPARISON_THRESHOLD:
        recommendation = "long_term"
    else:
        recommendation = "equal"

    return ComparisonResult(
        long_term=ReturnSummary.from_result(long_result),
        short_term=ReturnSummary.from_result(short_result),
        difference=ComparisonDifference(
            monthly_rent_diff=round_half_up(short_result.monthly_rent - long_result.monthly_rent),
            gross_return_diff=round_half_up(short_result.gross_return - long_result.gross_return, 2),
            net_return_diff=round_half_up(net_return_diff, 2),
            cashflow_diff=round_half_up(short_result.cashflow - long_result.cashflow),
        ),
        recommendation=recommendation,
    )
