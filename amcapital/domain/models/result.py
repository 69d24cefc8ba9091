"""Calculation output models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class DataSource(str, Enum):
    """Where the monthly revenue figure came from."""

    API_RENT = "api-rent"
    API_RENT_BASE = "api-rent-base"
    API_RENT_CALCULATED = "api-rent-calculated"
    API_AIRBNB = "api-airbnb"
    API_AIRBNB_NET = "api-airbnb-net"
    LOCAL = "local"

    @property
    def is_market_data(self) -> bool:
        return self is not DataSource.LOCAL


class ResolvedRevenue(BaseModel):
    """Monthly revenue picked by the resolver, with its provenance."""

    monthly_revenue: float = Field(..., description="Revenue in €/month, unrounded")
    source: DataSource

    model_config = {"frozen": True}


class CalculationResult(BaseModel):
    """Profitability metrics for one configuration.

    Currency fields are whole euros, rates are percentages with two decimals.
    ``cashflow`` keeps its sign.
    """

    monthly_rent: int = Field(..., description="Monthly revenue in €")
    gross_return: float = Field(..., description="Gross yield %")
    net_return: float = Field(..., description="Net yield %")
    cashflow: int = Field(..., description="Monthly cash-flow after loan in €")
    total_costs: int = Field(..., description="Total acquisition cost in €")
    notary_fees: int = Field(..., description="Notary fees in €")
    commission_fees: int = Field(..., description="Commission in €")
    architect_fees: int = Field(..., description="Architect fees in €")
    monthly_charges: int = Field(..., description="Recurring charges in €/month")
    taxes_and_insurance: int = Field(..., description="Property tax + insurance in €/month")
    management_fees: int = Field(..., description="Management fees in €/month")
    vacancy_loss: int = Field(..., description="Vacancy provision in €/month")
    roi: float = Field(..., description="Return on equity %")
    payback_period: float = Field(..., description="Years to recover the equity")

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    def to_payload(self) -> dict[str, Any]:
        """camelCase dict for the web and report layers."""
        return self.model_dump(by_alias=True)
