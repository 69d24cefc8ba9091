"""Multi-year projections of rent, charges and property value."""

from __future__ import annotations

import numpy as np
import pandas as pd

from amcapital.core.financial import round_half_up
from amcapital.domain.models.report import YearlyProjection
from amcapital.domain.models.result import CalculationResult
from amcapital.domain.models.simulation import SimulationConfig

PROJECTION_COLUMNS = {
    "year": "Année",
    "rent": "Loyers",
    "charges": "Charges",
    "net_income": "Revenu Net",
    "cumulative_return": "Revenu Cumulé",
    "property_value": "Valeur du Bien",
}


def calculate_yearly_projections(
    config: SimulationConfig,
    result: CalculationResult,
    years: int = 10,
    rent_growth: float = 0.02,
    property_growth: float = 0.03,
) -> list[YearlyProjection]:
    """Project annual figures over a holding period.

    Charges follow the rent index. Year 1 already includes one year of growth.

    Args:
        config: Simulation configuration (for the purchase price)
        result: Calculation result (monthly rent and charges)
        years: Number of years to project
        rent_growth: Annual rent and charges growth as a fraction
        property_growth: Annual property value growth as a fraction

    Returns:
        One projection per year, ``years`` entries
    """
    if years <= 0:
        return []

    year_index = np.arange(1, years + 1)
    rent_factor = np.power(1 + rent_growth, year_index)
    property_factor = np.power(1 + property_growth, year_index)

    annual_rent = result.monthly_rent * 12 * rent_factor
    annual_charges = result.monthly_charges * 12 * rent_factor
    net_income = annual_rent - annual_charges
    cumulative = np.cumsum(net_income)
    property_value = config.price * property_factor

    return [
        YearlyProjection(
            year=int(year_index[i]),
            rent=round_half_up(float(annual_rent[i])),
            charges=round_half_up(float(annual_charges[i])),
            net_income=round_half_up(float(net_income[i])),
            cumulative_return=round_half_up(float(cumulative[i])),
            property_value=round_half_up(float(property_value[i])),
        )
        for i in range(years)
    ]


def projections_to_dataframe(projections: list[YearlyProjection]) -> pd.DataFrame:
    """Tabulate projections with French column labels."""
    df = pd.DataFrame([p.model_dump() for p in projections], columns=list(PROJECTION_COLUMNS))
    return df.rename(columns=PROJECTION_COLUMNS)
