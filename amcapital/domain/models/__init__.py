"""Data models for amcapital."""

from .contact import ContactAcknowledgement, ContactRequest
from .market import (
    AirbnbFees,
    LongTermMarketData,
    MarketData,
    SeasonalRevenue,
    ShortTermMarketData,
    parse_market_data,
)
from .report import (
    ComparisonDifference,
    ComparisonResult,
    Recommendation,
    ReturnSummary,
    SimulationReport,
    TaxCalculation,
    TaxComparison,
    YearlyProjection,
)
from .result import CalculationResult, DataSource, ResolvedRevenue
from .simulation import ExploitationMode, SimulationConfig, UnitType

__all__ = [
    "SimulationConfig",
    "UnitType",
    "ExploitationMode",
    "AirbnbFees",
    "SeasonalRevenue",
    "LongTermMarketData",
    "ShortTermMarketData",
    "MarketData",
    "parse_market_data",
    "CalculationResult",
    "DataSource",
    "ResolvedRevenue",
    "Recommendation",
    "SimulationReport",
    "ReturnSummary",
    "ComparisonDifference",
    "ComparisonResult",
    "TaxCalculation",
    "TaxComparison",
    "YearlyProjection",
    "ContactRequest",
    "ContactAcknowledgement",
]
