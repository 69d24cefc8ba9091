"""Sidebar components: property inputs."""

from __future__ import annotations

from typing import Any

import streamlit as st

from amcapital.core.constants import CITY_PROFILES, INPUT_LIMITS, UNIT_TYPE_LABELS
from amcapital.core.formatting import display_city
from amcapital.ui.state import SessionManager

MODE_OPTIONS = {
    "long_term": "Location longue durée",
    "short_term": "Location courte durée (Airbnb)",
}


def _index_of(options: list[str], value: str) -> int:
    return options.index(value) if value in options else 0


def render_property_inputs() -> dict[str, Any]:
    """Render the property form and store the values in session state.

    Returns:
        Raw simulation input (snake_case keys)
    """
    current = SessionManager.get_inputs()
    price_limits = INPUT_LIMITS["price"]
    surface_limits = INPUT_LIMITS["surface"]

    st.subheader("🏠 Votre bien")

    price = st.slider(
        "Prix d'achat (€)",
        min_value=int(price_limits["min"]),
        max_value=int(price_limits["max"]),
        value=int(current["price"]),
        step=int(price_limits["step"]),
    )
    surface = st.slider(
        "Surface (m²)",
        min_value=int(surface_limits["min"]),
        max_value=int(surface_limits["max"]),
        value=int(current["surface"]),
        step=int(surface_limits["step"]),
    )

    unit_options = list(UNIT_TYPE_LABELS)
    unit_type = st.selectbox(
        "Type de bien",
        unit_options,
        index=_index_of(unit_options, current["unit_type"]),
        format_func=lambda k: UNIT_TYPE_LABELS[k],
    )

    city_options = sorted(CITY_PROFILES)
    city = st.selectbox(
        "Ville",
        city_options,
        index=_index_of(city_options, current["city"]),
        format_func=display_city,
    )

    mode_options = list(MODE_OPTIONS)
    mode = st.radio(
        "Mode d'exploitation",
        mode_options,
        index=_index_of(mode_options, current["exploitation_mode"]),
        format_func=lambda k: MODE_OPTIONS[k],
    )

    use_market = st.checkbox(
        "Utiliser les données marché",
        value=SessionManager.use_market_data(),
        help="Sinon, seules les données de référence locales sont utilisées.",
    )

    values = {
        "price": price,
        "surface": surface,
        "unit_type": unit_type,
        "exploitation_mode": mode,
        "city": city,
    }
    for key, value in values.items():
        st.session_state[key] = value
    st.session_state["use_market_data"] = use_market
    return values
