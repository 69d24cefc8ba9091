"""Revenue resolver and return calculator."""

from .recommendation import get_detailed_recommendations, get_recommendation
from .resolver import (
    get_city_profile,
    local_long_term_rent,
    local_short_term_rent,
    normalize_city,
    resolve_monthly_revenue,
    unit_coefficient,
)
from .returns import calculate_investment_returns, total_investment_cost

__all__ = [
    "normalize_city",
    "get_city_profile",
    "unit_coefficient",
    "local_long_term_rent",
    "local_short_term_rent",
    "resolve_monthly_revenue",
    "calculate_investment_returns",
    "total_investment_cost",
    "get_recommendation",
    "get_detailed_recommendations",
]
