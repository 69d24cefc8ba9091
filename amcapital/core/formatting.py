"""Display formatting shared by the UI and the PDF report."""

from __future__ import annotations


def format_euro(value: float | None, decimals: int = 0) -> str:
    """Format a number as Euro currency.

    Args:
        value: Amount to format
        decimals: Number of decimal places

    Returns:
        Formatted string like "1 234 567 €"
    """
    if value is None:
        return "—"
    if decimals == 0:
        return f"{int(round(value)):,}".replace(",", " ") + " €"
    return f"{value:,.{decimals}f}".replace(",", " ") + " €"


def format_pct(value: float | None, decimals: int = 2) -> str:
    """Format a percentage value (already x100) like "5.61 %"."""
    if value is None:
        return "—"
    return f"{value:.{decimals}f} %"


def format_years(value: float | None, decimals: int = 1) -> str:
    if value is None:
        return "—"
    return f"{value:.{decimals}f} ans"


def display_city(city: str) -> str:
    """Title-case a city key: "saint-malo" -> "Saint-Malo"."""
    return "-".join(part.capitalize() for part in city.strip().split("-"))
