"""Market data payloads.

One variant per exploitation mode, discriminated by ``mode``. Payloads
coming from the market-data layer use camelCase keys.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import AliasChoices, BaseModel, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from amcapital.domain.models.simulation import MODE_ALIASES, ExploitationMode

_PAYLOAD_CONFIG = {
    "frozen": True,
    "extra": "ignore",
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class AirbnbFees(BaseModel):
    """Short-term operating costs reported alongside revenue."""

    cleaning: float = Field(default=0.0, ge=0, description="Cleaning cost per turnover in €")
    management: float = Field(default=0.0, ge=0, description="Management fees in €")
    supplies: float = Field(default=0.0, ge=0, description="Consumables in €")
    utilities: float = Field(default=0.0, ge=0, description="Extra utilities in €")
    total: float = Field(default=0.0, ge=0, description="Total in €")

    model_config = _PAYLOAD_CONFIG


class SeasonalRevenue(BaseModel):
    """Revenue and occupancy for one calendar month."""

    month: int = Field(..., ge=1, le=12)
    revenue: float = Field(..., description="Monthly revenue in €")
    occupancy: float = Field(..., description="Occupancy in %")

    model_config = _PAYLOAD_CONFIG


class LongTermMarketData(BaseModel):
    """Long-term lease market data."""

    mode: Literal["long_term"] = "long_term"

    # Resolution fields, highest priority first
    total_monthly_rent: float | None = Field(None, description="Rent for the whole unit in €/month")
    monthly_rent: float | None = Field(None, description="Base monthly rent in €")
    rent_per_square_meter: float | None = Field(
        None,
        validation_alias=AliasChoices("rent_per_square_meter", "rentPerSquareMeter", "rentPerSqm"),
        description="Rent in €/m²/month",
    )

    # Informational
    city: str | None = None
    unit_type: str | None = None
    surface: float | None = None
    price_per_square_meter: float | None = None
    monthly_rent_per_square_meter: float | None = None
    coefficient: float | None = None
    data_source: str = "local"
    last_updated: datetime | None = None

    model_config = _PAYLOAD_CONFIG


class ShortTermMarketData(BaseModel):
    """Short-term (Airbnb) market data."""

    mode: Literal["short_term"] = "short_term"

    # Resolution fields, highest priority first
    monthly_revenue: float | None = Field(None, description="Gross revenue in €/month")
    net_monthly_revenue: float | None = Field(None, description="Revenue net of fees in €/month")

    fees: AirbnbFees | None = None
    seasonal_revenues: tuple[SeasonalRevenue, ...] = ()

    # Informational
    city: str | None = None
    unit_type: str | None = None
    surface: float | None = None
    nightly_rate: float | None = None
    occupancy_rate: float | None = Field(None, description="Occupancy in %")
    annual_revenue: float | None = None
    multiplier_vs_long_term: float | None = None
    data_source: str = "estimation"
    last_updated: datetime | None = None

    model_config = _PAYLOAD_CONFIG


MarketData = Annotated[
    Union[LongTermMarketData, ShortTermMarketData],
    Field(discriminator="mode"),
]

_market_data_adapter: TypeAdapter[Any] = TypeAdapter(MarketData)


def parse_market_data(
    payload: Mapping[str, Any],
    mode: ExploitationMode | str,
) -> LongTermMarketData | ShortTermMarketData:
    """Build the variant matching ``mode`` from a raw payload.

    A ``mode`` key already present in the payload wins.
    """
    if not isinstance(mode, ExploitationMode):
        mode = ExploitationMode(MODE_ALIASES.get(mode, mode))
    data = dict(payload)
    data.setdefault("mode", mode.value)
    return _market_data_adapter.validate_python(data)
