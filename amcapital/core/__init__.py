"""Core reference tables, loan maths and ambient services."""

from .exceptions import (
    AmCapitalError,
    ConfigurationError,
    InvalidConfigurationError,
    InvalidParameterError,
    MarketDataError,
    ReportExportError,
)
from .financial import amortized_payment, generate_amortization_schedule, round_half_up

__all__ = [
    "amortized_payment",
    "generate_amortization_schedule",
    "round_half_up",
    # Exceptions
    "AmCapitalError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "InvalidParameterError",
    "MarketDataError",
    "ReportExportError",
]
