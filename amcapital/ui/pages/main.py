"""Main page: simulation results in tabs."""

from __future__ import annotations

import streamlit as st

from amcapital.application.services.market_data import MarketDataService
from amcapital.application.services.projections import (
    calculate_yearly_projections,
    projections_to_dataframe,
)
from amcapital.application.services.simulation import calculate_comparison
from amcapital.application.services.taxation import calculate_taxes
from amcapital.core.constants import FINANCING
from amcapital.core.exceptions import ReportExportError
from amcapital.core.financial import generate_amortization_schedule
from amcapital.core.logging import get_logger
from amcapital.core.settings import get_settings
from amcapital.domain.models.report import SimulationReport
from amcapital.services.exporter import ResultExporter
from amcapital.services.pdf_report import PDFReportGenerator, report_filename
from amcapital.ui.components.charts import (
    render_amortization_chart,
    render_projection_chart,
    render_seasonal_chart,
)
from amcapital.ui.components.contact import render_contact_form
from amcapital.ui.components.results import (
    render_comparison,
    render_cost_details,
    render_kpis,
    render_recommendations,
    render_tax_comparison,
)

log = get_logger(__name__)


def render_header() -> None:
    settings = get_settings()
    st.title(f"📊 {settings.company_name} · Simulateur de rentabilité")
    st.caption("Estimez le rendement locatif de votre investissement en quelques secondes.")


def render_main_page(report: SimulationReport | None, market_service: MarketDataService | None) -> None:
    """Render the results area.

    Args:
        report: Last simulation, or None when the inputs are invalid
        market_service: Market data source for the comparison tab
    """
    render_header()

    if report is None:
        st.info("Renseignez les caractéristiques du bien dans le panneau latéral.")
        render_contact_form()
        return

    tab_results, tab_compare, tab_tax, tab_proj, tab_contact = st.tabs([
        "📈 Résultats",
        "⚖️ Comparaison",
        "🧾 Fiscalité",
        "🔮 Projections",
        "📬 Contact",
    ])

    with tab_results:
        render_kpis(report)
        st.divider()
        render_cost_details(report)
        render_recommendations(report)
        if report.config.is_short_term:
            render_seasonal_chart(report.market_data)
        _render_exports(report)

    with tab_compare:
        long_data = short_data = None
        if market_service is not None:
            cfg = report.config
            long_data = market_service.get_rent_data(cfg.city, cfg.unit_type, cfg.surface)
            short_data = market_service.get_airbnb_data(cfg.city, cfg.unit_type, cfg.surface)
        render_comparison(calculate_comparison(report.config, long_data, short_data))

    with tab_tax:
        marginal_rate = st.slider("Tranche marginale d'imposition (%)", 0, 45, 30, 1) / 100
        annual_rent = report.result.monthly_rent * 12
        annual_charges = report.result.monthly_charges * 12
        render_tax_comparison(
            calculate_taxes(annual_rent, annual_charges, marginal_rate, report.config.exploitation_mode)
        )

    with tab_proj:
        years = st.slider("Horizon (années)", 5, 30, 10, 1)
        df = projections_to_dataframe(calculate_yearly_projections(report.config, report.result, years))
        render_projection_chart(df)
        st.dataframe(df, hide_index=True, use_container_width=True)

        loan = report.result.total_costs * FINANCING.loan_ratio
        schedule = generate_amortization_schedule(loan, FINANCING.duration_years, FINANCING.mortgage_rate)
        render_amortization_chart(schedule)

    with tab_contact:
        render_contact_form()


def _render_exports(report: SimulationReport) -> None:
    if not get_settings().enable_export:
        return
    pdf_bytes = PDFReportGenerator().render_bytes(report)
    st.download_button(
        "📄 Télécharger le rapport PDF",
        data=pdf_bytes,
        file_name=report_filename(report),
        mime="application/pdf",
    )
    if st.button("🗂️ Archiver la simulation (JSON)"):
        try:
            path = ResultExporter(output_dir=get_settings().reports_dir).save_results([report])
        except ReportExportError as e:
            log.error("archive_failed", report_id=report.report_id, error=str(e))
            st.error("Archivage impossible.")
        else:
            st.success(f"Simulation archivée : {path}")
