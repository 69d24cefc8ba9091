"""Custom exceptions for amcapital.

Domain-specific exception types for better error handling and debugging.
"""

from __future__ import annotations

from typing import Any


class AmCapitalError(Exception):
    """Base exception for all amcapital errors."""
    pass


# --- Input Errors ---

class InvalidConfigurationError(AmCapitalError):
    """Simulation input rejected by the validation gate."""

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages) or "Invalid configuration")


class InvalidParameterError(AmCapitalError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


# --- Data Errors ---

class MarketDataError(AmCapitalError):
    """Market data could not be produced for the requested property."""
    pass


# --- Export Errors ---

class ReportExportError(AmCapitalError):
    """Error while writing a JSON or PDF report."""
    pass


# --- Configuration Errors ---

class ConfigurationError(AmCapitalError):
    """Error in application configuration."""
    pass
