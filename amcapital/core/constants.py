"""Reference tables for the profitability engine.

City rent profiles, unit-type coefficients, fee schedule, financing terms and
short-term rental assumptions. The tables are bundled in an immutable
``ReferenceTables`` instance; a reload replaces the whole bundle at once.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from amcapital.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class CityMarketProfile:
    """Baseline long-term rent for a city."""

    rent_per_square_meter: float  # €/m²/month
    market_multiplier: float = 1.0


@dataclass(frozen=True)
class FeeSchedule:
    """Acquisition fees and recurring charge rates."""

    notary_rate: float = 0.09             # % of price
    commission_rate: float = 0.085        # % of price
    architect_long_term: float = 90.0     # €/m²
    architect_short_term: float = 120.0   # €/m²
    management_rate: float = 0.08         # % of monthly revenue
    vacancy_rate: float = 0.05            # % of monthly revenue, long-term only
    insurance_annual: float = 400.0       # € per year
    property_tax_rate: float = 0.015      # % of price per year
    maintenance_rate: float = 0.02        # % of price per year


@dataclass(frozen=True)
class FinancingTerms:
    """Fixed-rate amortizing loan used for cash-flow and ROI."""

    mortgage_rate: float = 0.048
    duration_years: int = 20
    loan_ratio: float = 0.8
    equity_ratio: float = 0.2


@dataclass(frozen=True)
class ShortTermAssumptions:
    """Short-term (Airbnb) revenue model when no market data is available."""

    base_multiplier: float = 3.0
    min_multiplier: float = 2.5
    max_multiplier: float = 3.5
    occupancy_rate: float = 0.70


DEFAULT_CITY = "paris"

CITY_PROFILES: Mapping[str, CityMarketProfile] = MappingProxyType({
    # Métropoles
    "paris": CityMarketProfile(35, 1.2),
    "lyon": CityMarketProfile(18, 1.1),
    "marseille": CityMarketProfile(15, 1.0),
    "toulouse": CityMarketProfile(16, 1.05),
    "nice": CityMarketProfile(22, 1.15),
    "nantes": CityMarketProfile(14, 1.0),
    "montpellier": CityMarketProfile(16, 1.0),
    "strasbourg": CityMarketProfile(15, 0.95),
    "bordeaux": CityMarketProfile(17, 1.08),
    "lille": CityMarketProfile(13, 0.95),
    # Villes moyennes
    "rennes": CityMarketProfile(13, 1.0),
    "reims": CityMarketProfile(11, 0.9),
    "saint-etienne": CityMarketProfile(9, 0.85),
    "toulon": CityMarketProfile(14, 1.0),
    "grenoble": CityMarketProfile(14, 1.0),
    "dijon": CityMarketProfile(12, 0.95),
    "angers": CityMarketProfile(11, 0.9),
    "nimes": CityMarketProfile(12, 0.95),
    "villeurbanne": CityMarketProfile(16, 1.05),
    "clermont-ferrand": CityMarketProfile(11, 0.9),
    # Côtières et touristiques
    "cannes": CityMarketProfile(28, 1.3),
    "antibes": CityMarketProfile(24, 1.2),
    "biarritz": CityMarketProfile(20, 1.15),
    "la-rochelle": CityMarketProfile(16, 1.1),
    "saint-malo": CityMarketProfile(18, 1.1),
    "deauville": CityMarketProfile(22, 1.2),
    "arcachon": CityMarketProfile(19, 1.15),
    # Universitaires
    "poitiers": CityMarketProfile(10, 0.85),
    "tours": CityMarketProfile(12, 0.9),
    "orleans": CityMarketProfile(12, 0.9),
    "caen": CityMarketProfile(12, 0.9),
    "limoges": CityMarketProfile(9, 0.8),
    "besancon": CityMarketProfile(11, 0.85),
})

# t2 is the reference unit
UNIT_TYPE_COEFFICIENTS: Mapping[str, float] = MappingProxyType({
    "studio": 1.39,
    "t2": 1.00,
    "t3": 0.81,
    "t4": 0.80,
})

UNIT_TYPE_LABELS: Mapping[str, str] = MappingProxyType({
    "studio": "Studio",
    "t2": "T2",
    "t3": "T3",
    "t4": "T4",
})

FEES = FeeSchedule()
FINANCING = FinancingTerms()
SHORT_TERM = ShortTermAssumptions()

INPUT_LIMITS: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "price": MappingProxyType({"min": 50_000, "max": 1_000_000, "step": 5_000}),
    "surface": MappingProxyType({"min": 10, "max": 200, "step": 5}),
})


@dataclass(frozen=True)
class ReferenceTables:
    """Immutable bundle of every table the engine reads."""

    city_profiles: Mapping[str, CityMarketProfile] = field(default_factory=lambda: CITY_PROFILES)
    unit_coefficients: Mapping[str, float] = field(default_factory=lambda: UNIT_TYPE_COEFFICIENTS)
    fees: FeeSchedule = FEES
    financing: FinancingTerms = FINANCING
    short_term: ShortTermAssumptions = SHORT_TERM
    default_city: str = DEFAULT_CITY

    def __post_init__(self) -> None:
        if self.default_city not in self.city_profiles:
            raise ConfigurationError(f"default city '{self.default_city}' missing from city profiles")
        # Freeze caller-supplied dicts
        object.__setattr__(self, "city_profiles", MappingProxyType(dict(self.city_profiles)))
        object.__setattr__(self, "unit_coefficients", MappingProxyType(dict(self.unit_coefficients)))


_tables_lock = threading.Lock()
_current_tables = ReferenceTables()


def get_reference_tables() -> ReferenceTables:
    """Return the bundle currently in use."""
    return _current_tables


def replace_reference_tables(tables: ReferenceTables) -> ReferenceTables:
    """Swap the whole bundle and return the previous one.

    Calculations already running keep the bundle they started with.
    """
    global _current_tables
    if not isinstance(tables, ReferenceTables):
        raise TypeError("tables must be a ReferenceTables instance")
    with _tables_lock:
        previous = _current_tables
        _current_tables = tables
    return previous
