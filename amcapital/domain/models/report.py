"""Report-level models.

Wrap a calculation with its metadata, and hold the outputs of the
comparison, taxation and projection services.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, computed_field

from amcapital.domain.models.market import LongTermMarketData, ShortTermMarketData
from amcapital.domain.models.result import CalculationResult, DataSource
from amcapital.domain.models.simulation import SimulationConfig

RecommendationLevel = Literal["excellent", "good", "fair", "weak"]


class Recommendation(BaseModel):
    """Verdict on the gross yield."""

    level: RecommendationLevel
    message: str

    model_config = {"frozen": True}


class SimulationReport(BaseModel):
    """One simulation run as shown to the user and exported."""

    report_id: str = Field(..., description="Short report identifier")
    generated_at: datetime
    config: SimulationConfig
    result: CalculationResult
    data_source: DataSource
    recommendation: Recommendation
    market_data: LongTermMarketData | ShortTermMarketData | None = None

    model_config = {"frozen": True}

    @computed_field
    @property
    def display_cashflow(self) -> int:
        """Cash-flow as displayed: negative values show as 0."""
        return max(0, self.result.cashflow)


class ReturnSummary(BaseModel):
    """Headline metrics of one exploitation mode."""

    monthly_rent: int
    gross_return: float
    net_return: float
    cashflow: int

    model_config = {"frozen": True}

    @classmethod
    def from_result(cls, result: CalculationResult) -> ReturnSummary:
        return cls(
            monthly_rent=result.monthly_rent,
            gross_return=result.gross_return,
            net_return=result.net_return,
            cashflow=result.cashflow,
        )


class ComparisonDifference(BaseModel):
    """Short-term minus long-term."""

    monthly_rent_diff: int
    gross_return_diff: float
    net_return_diff: float
    cashflow_diff: int

    model_config = {"frozen": True}


class ComparisonResult(BaseModel):
    """Long-term vs. short-term side by side."""

    long_term: ReturnSummary
    short_term: ReturnSummary
    difference: ComparisonDifference
    recommendation: Literal["long_term", "short_term", "equal"]

    model_config = {"frozen": True}


class TaxCalculation(BaseModel):
    """Income tax under one regime."""

    regime: Literal["micro", "reel"]
    taxable_income: int
    tax_amount: int
    net_income_after_tax: int
    effective_rate: float = Field(..., description="Tax / gross rent in %")

    model_config = {"frozen": True}


class TaxComparison(BaseModel):
    micro: TaxCalculation
    reel: TaxCalculation
    recommendation: Literal["micro", "reel"]

    model_config = {"frozen": True}


class YearlyProjection(BaseModel):
    """Projected figures for one holding year."""

    year: int = Field(..., ge=1)
    rent: int
    charges: int
    net_income: int
    cumulative_return: int
    property_value: int

    model_config = {"frozen": True}
