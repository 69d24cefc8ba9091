"""Chart components for visualization."""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from amcapital.domain.models.market import ShortTermMarketData

MONTH_LABELS = ["Jan", "Fév", "Mar", "Avr", "Mai", "Juin", "Juil", "Août", "Sep", "Oct", "Nov", "Déc"]


def render_projection_chart(df: pd.DataFrame, key: str = "proj") -> None:
    """Render projected net income and property value.

    Args:
        df: Projection DataFrame with French column labels
        key: Unique key for the chart element
    """
    if df is None or df.empty:
        st.warning("Pas de projection disponible.")
        return

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=df["Année"],
        y=df["Revenu Net"],
        name="Revenu Net",
        marker_color="#17a2b8",
    ))
    fig.add_trace(go.Scatter(
        x=df["Année"],
        y=df["Revenu Cumulé"],
        name="Revenu Cumulé",
        line=dict(color="#28a745", width=3),
        mode="lines+markers",
    ))
    fig.update_layout(
        title="Projection des revenus",
        xaxis_title="Année",
        yaxis_title="Montant (€)",
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )
    st.plotly_chart(fig, use_container_width=True, key=f"projection_{key}")

    fig_value = go.Figure(go.Scatter(
        x=df["Année"],
        y=df["Valeur du Bien"],
        fill="tozeroy",
        line=dict(color="#121f3e"),
        mode="lines",
        name="Valeur du Bien",
    ))
    fig_value.update_layout(title="Valeur estimée du bien", xaxis_title="Année", yaxis_title="€")
    st.plotly_chart(fig_value, use_container_width=True, key=f"value_{key}")


def render_seasonal_chart(market_data: ShortTermMarketData | None, key: str = "season") -> None:
    """Monthly short-term revenue with occupancy."""
    if market_data is None or not market_data.seasonal_revenues:
        return

    months = [MONTH_LABELS[s.month - 1] for s in market_data.seasonal_revenues]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=months,
        y=[s.revenue for s in market_data.seasonal_revenues],
        name="Revenu (€)",
        marker_color="#ffc107",
    ))
    fig.add_trace(go.Scatter(
        x=months,
        y=[s.occupancy for s in market_data.seasonal_revenues],
        name="Occupation (%)",
        yaxis="y2",
        line=dict(color="#dc3545"),
    ))
    fig.update_layout(
        title="Saisonnalité courte durée",
        yaxis=dict(title="Revenu (€)"),
        yaxis2=dict(title="Occupation (%)", overlaying="y", side="right"),
        hovermode="x unified",
    )
    st.plotly_chart(fig, use_container_width=True, key=f"seasonal_{key}")


def render_amortization_chart(schedule: dict, key: str = "amort") -> None:
    """Yearly principal vs. interest of the loan."""
    if not schedule or not schedule.get("month"):
        return

    df = pd.DataFrame({
        "Mois": schedule["month"],
        "Intérêts": schedule["interest"],
        "Capital": schedule["principal"],
    })
    df["Année"] = (df["Mois"] - 1) // 12 + 1
    yearly = df.groupby("Année")[["Capital", "Intérêts"]].sum().reset_index()

    fig = go.Figure()
    fig.add_trace(go.Bar(x=yearly["Année"], y=yearly["Capital"], name="Capital remboursé", marker_color="#28a745"))
    fig.add_trace(go.Bar(x=yearly["Année"], y=yearly["Intérêts"], name="Intérêts", marker_color="#dc3545"))
    fig.update_layout(
        barmode="stack",
        title="Remboursement du crédit",
        xaxis_title="Année",
        yaxis_title="Montant (€)",
    )
    st.plotly_chart(fig, use_container_width=True, key=f"amortization_{key}")
