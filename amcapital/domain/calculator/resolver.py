"""Market-rate resolver.

Turns a configuration plus optional market data into one monthly revenue
figure and a provenance tag. Pure: reads only its arguments and the
reference tables.
"""

from __future__ import annotations

import re
import unicodedata

from amcapital.core.constants import CityMarketProfile, ReferenceTables, get_reference_tables
from amcapital.core.logging import get_logger
from amcapital.domain.models.market import LongTermMarketData, ShortTermMarketData
from amcapital.domain.models.result import DataSource, ResolvedRevenue
from amcapital.domain.models.simulation import ExploitationMode, SimulationConfig

log = get_logger(__name__)

_SEPARATORS = re.compile(r"[\s_\-']+")


def normalize_city(city: str | None) -> str:
    """Normalize a city name to a reference-table key.

    ``"Saint Étienne"`` -> ``"saint-etienne"``.
    """
    if not city:
        return ""
    decomposed = unicodedata.normalize("NFKD", city.strip().lower())
    ascii_only = "".join(c for c in decomposed if not unicodedata.combining(c))
    return _SEPARATORS.sub("-", ascii_only).strip("-")


def get_city_profile(city: str | None, tables: ReferenceTables | None = None) -> CityMarketProfile:
    """Profile for ``city``, or the default city's profile when unknown."""
    tables = tables or get_reference_tables()
    profile = tables.city_profiles.get(normalize_city(city))
    if profile is None:
        return tables.city_profiles[tables.default_city]
    return profile


def unit_coefficient(unit_type: str | None, tables: ReferenceTables | None = None) -> float:
    """Rent coefficient for the unit type (1.0, the t2 reference, when unknown)."""
    tables = tables or get_reference_tables()
    key = unit_type.strip().lower() if isinstance(unit_type, str) else unit_type
    return tables.unit_coefficients.get(key, 1.0)


def local_long_term_rent(config: SimulationConfig, tables: ReferenceTables | None = None) -> float:
    """City rent per m² x surface x unit coefficient."""
    tables = tables or get_reference_tables()
    profile = get_city_profile(config.city, tables)
    return profile.rent_per_square_meter * config.surface * unit_coefficient(config.unit_type, tables)


def local_short_term_rent(config: SimulationConfig, tables: ReferenceTables | None = None) -> float:
    """Long-term local rent scaled by the short-term multiplier and occupancy."""
    tables = tables or get_reference_tables()
    long_term = local_long_term_rent(config, tables)
    return long_term * tables.short_term.base_multiplier * tables.short_term.occupancy_rate


def _resolve_long_term(
    config: SimulationConfig,
    market_data: LongTermMarketData | None,
    tables: ReferenceTables,
) -> ResolvedRevenue:
    if market_data is not None:
        # Zero counts as absent
        if market_data.total_monthly_rent:
            return ResolvedRevenue(monthly_revenue=market_data.total_monthly_rent, source=DataSource.API_RENT)
        if market_data.monthly_rent:
            return ResolvedRevenue(monthly_revenue=market_data.monthly_rent, source=DataSource.API_RENT_BASE)
        if market_data.rent_per_square_meter:
            return ResolvedRevenue(
                monthly_revenue=market_data.rent_per_square_meter * config.surface,
                source=DataSource.API_RENT_CALCULATED,
            )
    return ResolvedRevenue(monthly_revenue=local_long_term_rent(config, tables), source=DataSource.LOCAL)


def _resolve_short_term(
    config: SimulationConfig,
    market_data: ShortTermMarketData | None,
    tables: ReferenceTables,
) -> ResolvedRevenue:
    if market_data is not None:
        if market_data.monthly_revenue:
            return ResolvedRevenue(monthly_revenue=market_data.monthly_revenue, source=DataSource.API_AIRBNB)
        if market_data.net_monthly_revenue:
            return ResolvedRevenue(
                monthly_revenue=market_data.net_monthly_revenue,
                source=DataSource.API_AIRBNB_NET,
            )
    return ResolvedRevenue(monthly_revenue=local_short_term_rent(config, tables), source=DataSource.LOCAL)


def matching_market_data(
    config: SimulationConfig,
    market_data: LongTermMarketData | ShortTermMarketData | None,
) -> LongTermMarketData | ShortTermMarketData | None:
    """Return ``market_data`` if its variant fits the configuration's mode."""
    if market_data is None:
        return None
    if market_data.mode != config.exploitation_mode.value:
        log.warning(
            "market_data_mode_mismatch",
            expected=config.exploitation_mode.value,
            received=market_data.mode,
        )
        return None
    return market_data


def resolve_monthly_revenue(
    config: SimulationConfig,
    market_data: LongTermMarketData | ShortTermMarketData | None = None,
    tables: ReferenceTables | None = None,
) -> ResolvedRevenue:
    """Pick the monthly revenue for a configuration.

    Long-term priority: ``total_monthly_rent``, ``monthly_rent``,
    ``rent_per_square_meter`` x surface, then the local table.
    Short-term priority: ``monthly_revenue``, ``net_monthly_revenue``, then the
    local table x base multiplier x occupancy.

    Args:
        config: Validated simulation configuration
        market_data: Optional payload from the market-data layer
        tables: Reference tables (current bundle by default)

    Returns:
        The revenue figure and its ``DataSource`` tag
    """
    tables = tables or get_reference_tables()
    market_data = matching_market_data(config, market_data)

    if config.exploitation_mode is ExploitationMode.SHORT_TERM:
        resolved = _resolve_short_term(config, market_data, tables)
    else:
        resolved = _resolve_long_term(config, market_data, tables)

    log.debug(
        "revenue_resolved",
        mode=config.exploitation_mode.value,
        source=resolved.source.value,
        monthly_revenue=resolved.monthly_revenue,
    )
    return resolved
