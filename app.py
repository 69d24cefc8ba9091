"""Main Application Entry Point.

Collects the property inputs in the sidebar, runs the simulation and
hands the report to the main page.
"""

from typing import Any

import streamlit as st

from amcapital.application.services.market_data import MarketDataService
from amcapital.application.services.simulation import simulate_investment
from amcapital.core.logging import configure_logging, get_logger
from amcapital.core.validation import validate_simulation_data
from amcapital.domain.models.simulation import SimulationConfig
from amcapital.ui.components.sidebar import render_property_inputs
from amcapital.ui.pages.main import render_main_page
from amcapital.ui.state import SessionManager

log = get_logger(__name__)


@st.cache_resource
def get_market_service() -> MarketDataService:
    """One market data service (and cache) per server process."""
    return MarketDataService()


def render_sidebar() -> dict[str, Any]:
    with st.sidebar:
        st.title("⚙️ Paramètres")
        return render_property_inputs()


def main() -> None:
    st.set_page_config(
        page_title="A&M Capital · Simulateur",
        page_icon="📊",
        layout="wide",
    )
    configure_logging()
    SessionManager.initialize()

    inputs = render_sidebar()
    errors = validate_simulation_data(inputs)

    report = None
    service = None
    if errors:
        with st.sidebar:
            for error in errors:
                st.error(error)
    else:
        config = SimulationConfig.model_validate(inputs)
        if SessionManager.use_market_data():
            service = get_market_service()
            service.sweep_expired()
            market_data = service.get_market_data(config)
        else:
            market_data = None
        report = simulate_investment(config, market_data)
    SessionManager.set_last_report(report)

    render_main_page(report, service)


if __name__ == "__main__":
    main()
