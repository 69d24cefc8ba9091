"""Result display components."""

from __future__ import annotations

import streamlit as st

from amcapital.core.formatting import format_euro, format_pct, format_years
from amcapital.domain.calculator.recommendation import get_detailed_recommendations
from amcapital.domain.models.report import ComparisonResult, SimulationReport, TaxComparison
from amcapital.ui.helpers import colorize_kpi, source_badge

_LEVEL_BOX = {
    "excellent": st.success,
    "good": st.info,
    "fair": st.warning,
    "weak": st.error,
}


def render_kpis(report: SimulationReport) -> None:
    """Headline metrics of a simulation."""
    result = report.result

    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.caption("Revenu mensuel")
        st.markdown(f"### {format_euro(result.monthly_rent)}")
    with c2:
        st.caption("Rentabilité brute")
        st.markdown(colorize_kpi(result.gross_return, "yield", "h3"), unsafe_allow_html=True)
    with c3:
        st.caption("Rentabilité nette")
        st.markdown(colorize_kpi(result.net_return, "yield", "h3"), unsafe_allow_html=True)
    with c4:
        st.caption("Cash-flow mensuel")
        st.markdown(colorize_kpi(result.cashflow, "cf", "h3"), unsafe_allow_html=True)

    icon, label = source_badge(report.data_source)
    st.caption(f"{icon} Source : {label} · Rapport {report.report_id}")

    _LEVEL_BOX[report.recommendation.level](report.recommendation.message)


def render_cost_details(report: SimulationReport) -> None:
    """Acquisition costs and monthly charges breakdown."""
    result = report.result

    col_a, col_b = st.columns(2)
    with col_a:
        st.markdown("**Coût d'acquisition**")
        st.write(f"Prix d'achat : {format_euro(report.config.price)}")
        st.write(f"Frais de notaire : {format_euro(result.notary_fees)}")
        st.write(f"Commission : {format_euro(result.commission_fees)}")
        st.write(f"Honoraires architecte : {format_euro(result.architect_fees)}")
        st.markdown(f"**Total : {format_euro(result.total_costs)}**")
    with col_b:
        st.markdown("**Charges mensuelles**")
        st.write(f"Taxe foncière et assurance : {format_euro(result.taxes_and_insurance)}")
        st.write(f"Gestion : {format_euro(result.management_fees)}")
        st.write(f"Vacance locative : {format_euro(result.vacancy_loss)}")
        st.markdown(f"**Total : {format_euro(result.monthly_charges)}**")

    c1, c2 = st.columns(2)
    c1.metric("ROI (fonds propres)", format_pct(result.roi))
    c2.metric("Délai de retour", format_years(result.payback_period))


def render_recommendations(report: SimulationReport) -> None:
    for title, content in get_detailed_recommendations(report.config, report.result):
        with st.expander(title, expanded=False):
            st.write(content)


def render_comparison(comparison: ComparisonResult) -> None:
    """Side-by-side long-term vs. short-term metrics."""
    col_lt, col_st = st.columns(2)
    for col, title, summary in (
        (col_lt, "Longue durée", comparison.long_term),
        (col_st, "Courte durée", comparison.short_term),
    ):
        with col:
            st.markdown(f"**{title}**")
            st.metric("Revenu mensuel", format_euro(summary.monthly_rent))
            st.metric("Rentabilité brute", format_pct(summary.gross_return))
            st.metric("Rentabilité nette", format_pct(summary.net_return))
            st.metric("Cash-flow", format_euro(max(0, summary.cashflow)))

    diff = comparison.difference
    if comparison.recommendation == "short_term":
        st.success(f"La courte durée rapporte {format_pct(diff.net_return_diff)} de rentabilité nette en plus.")
    elif comparison.recommendation == "long_term":
        st.success(f"La longue durée rapporte {format_pct(-diff.net_return_diff)} de rentabilité nette en plus.")
    else:
        st.info("Les deux modes d'exploitation offrent une rentabilité comparable.")


def render_tax_comparison(taxes: TaxComparison) -> None:
    """Micro vs. réel regime table."""
    rows = []
    for calc, label in ((taxes.micro, "Micro"), (taxes.reel, "Réel")):
        rows.append({
            "Régime": label,
            "Revenu imposable": format_euro(calc.taxable_income),
            "Impôt": format_euro(calc.tax_amount),
            "Revenu net après impôt": format_euro(calc.net_income_after_tax),
            "Taux effectif": format_pct(calc.effective_rate),
        })
    st.dataframe(rows, hide_index=True, use_container_width=True)
    best = "micro" if taxes.recommendation == "micro" else "réel"
    st.info(f"Régime le plus favorable : **{best}**")
