"""UI helper functions for Streamlit.

Colored KPI rendering and data-source badges.
"""

from __future__ import annotations

from amcapital.core.formatting import format_euro, format_pct
from amcapital.domain.models.result import DataSource

SOURCE_LABELS = {
    DataSource.API_RENT: "Données marché (loyer total)",
    DataSource.API_RENT_BASE: "Données marché (loyer de base)",
    DataSource.API_RENT_CALCULATED: "Données marché (prix au m²)",
    DataSource.API_AIRBNB: "Données marché courte durée",
    DataSource.API_AIRBNB_NET: "Données marché courte durée (net)",
    DataSource.LOCAL: "Données de référence",
}


def colorize_kpi(
    value: float | None,
    kpi_type: str,
    size: str = "normal",
) -> str:
    """Return colored HTML for a KPI value.

    Args:
        value: The KPI value
        kpi_type: Type of KPI (cf, yield, roi)
        size: Font size (normal, h2, h3)

    Returns:
        HTML string with appropriate coloring
    """
    if value is None:
        return "<span>—</span>"

    color = "#333333"

    if kpi_type == "cf":
        # Negative cash-flow is displayed as 0
        shown = max(0, value)
        color = "#28a745" if value > 0 else "#dc3545"
        formatted = format_euro(shown)
    elif kpi_type == "yield":
        if value >= 8:
            color = "#28a745"
        elif value >= 5:
            color = "#17a2b8"
        elif value >= 3:
            color = "#ffc107"
        else:
            color = "#dc3545"
        formatted = format_pct(value)
    elif kpi_type == "roi":
        color = "#28a745" if value >= 0 else "#dc3545"
        formatted = format_pct(value)
    else:
        formatted = str(value)

    if size == "h2":
        return f'<h2 style="color:{color};margin:0">{formatted}</h2>'
    elif size == "h3":
        return f'<h3 style="color:{color};margin:0">{formatted}</h3>'
    return f'<span style="color:{color};font-weight:600">{formatted}</span>'


def source_badge(source: DataSource) -> tuple[str, str]:
    """Icon and label describing where the revenue came from."""
    icon = "🌐" if source.is_market_data else "🗄️"
    return icon, SOURCE_LABELS.get(source, source.value)
