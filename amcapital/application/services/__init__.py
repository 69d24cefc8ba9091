"""Application services."""

from .contact import build_contact_request, submit_contact_request
from .market_data import AirbnbEstimator, MarketDataService, RentEstimator
from .projections import calculate_yearly_projections, projections_to_dataframe
from .simulation import calculate, calculate_comparison, simulate_from_input, simulate_investment
from .taxation import calculate_taxes

__all__ = [
    "calculate",
    "simulate_investment",
    "simulate_from_input",
    "calculate_comparison",
    "calculate_taxes",
    "calculate_yearly_projections",
    "projections_to_dataframe",
    "RentEstimator",
    "AirbnbEstimator",
    "MarketDataService",
    "build_contact_request",
    "submit_contact_request",
]
