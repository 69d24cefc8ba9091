"""Session state management for Streamlit app.

Provides a centralized interface for managing Streamlit session state,
with type-safe accessors and default values.
"""

from __future__ import annotations

from typing import Any, TypeVar

import streamlit as st

from amcapital.domain.models.report import SimulationReport

T = TypeVar("T")


def get_state(key: str, default: T) -> T:
    """Get a value from session state with a default.

    Args:
        key: Session state key
        default: Default value if key not present

    Returns:
        Value from session state or default
    """
    if key not in st.session_state:
        st.session_state[key] = default
    return st.session_state[key]


def set_state(key: str, value: Any) -> None:
    st.session_state[key] = value


def init_state(defaults: dict[str, Any]) -> None:
    """Initialize multiple session state values with defaults.

    Only sets values that don't already exist.
    """
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


class SessionManager:
    """Manages all session state for the app."""

    DEFAULTS = {
        "price": 250_000,
        "surface": 50,
        "unit_type": "t2",
        "exploitation_mode": "long_term",
        "city": "paris",
        "use_market_data": True,
        "last_report": None,
        "contact_submitted": False,
    }

    @classmethod
    def initialize(cls) -> None:
        init_state(cls.DEFAULTS)

    @classmethod
    def get_inputs(cls) -> dict[str, Any]:
        """Current simulation inputs as a raw mapping."""
        return {
            "price": get_state("price", cls.DEFAULTS["price"]),
            "surface": get_state("surface", cls.DEFAULTS["surface"]),
            "unit_type": get_state("unit_type", cls.DEFAULTS["unit_type"]),
            "exploitation_mode": get_state("exploitation_mode", cls.DEFAULTS["exploitation_mode"]),
            "city": get_state("city", cls.DEFAULTS["city"]),
        }

    @classmethod
    def set_last_report(cls, report: SimulationReport | None) -> None:
        set_state("last_report", report)

    @classmethod
    def use_market_data(cls) -> bool:
        return get_state("use_market_data", True)
