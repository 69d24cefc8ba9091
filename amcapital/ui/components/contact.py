"""Contact form component."""

from __future__ import annotations

import streamlit as st

from amcapital.application.services.contact import build_contact_request, submit_contact_request
from amcapital.core.exceptions import InvalidParameterError
from amcapital.core.validation import validate_contact_data

PROJECT_TYPES = {
    "investment": "Investissement locatif",
    "advice": "Conseil",
    "management": "Gestion de bien",
    "other": "Autre",
}
BUDGETS = {
    "": "Sélectionnez une fourchette",
    "0-100k": "Moins de 100k€",
    "100k-250k": "100k€ - 250k€",
    "250k-500k": "250k€ - 500k€",
    "500k-1M": "500k€ - 1M€",
    "1M+": "Plus de 1M€",
}
TIMELINES = {
    "": "Sélectionnez un délai",
    "immediate": "Immédiat",
    "1-3months": "1-3 mois",
    "3-6months": "3-6 mois",
    "6-12months": "6-12 mois",
    "12months+": "Plus de 12 mois",
}


def render_contact_form() -> None:
    """Lead capture form; errors are listed under the form."""
    st.subheader("📬 Être recontacté")

    with st.form("contact_form", clear_on_submit=False):
        c1, c2 = st.columns(2)
        first_name = c1.text_input("Prénom")
        last_name = c2.text_input("Nom")
        email = c1.text_input("Email")
        phone = c2.text_input("Téléphone")
        project_type = st.selectbox(
            "Projet",
            list(PROJECT_TYPES),
            format_func=lambda k: PROJECT_TYPES[k],
        )
        c3, c4 = st.columns(2)
        budget = c3.selectbox(
            "Budget envisagé",
            list(BUDGETS),
            format_func=lambda k: BUDGETS[k],
        )
        timeline = c4.selectbox(
            "Calendrier souhaité",
            list(TIMELINES),
            format_func=lambda k: TIMELINES[k],
        )
        message = st.text_area("Message")
        submitted = st.form_submit_button("Envoyer")

    if not submitted:
        return

    data = {
        "first_name": first_name,
        "last_name": last_name,
        "email": email,
        "phone": phone,
        "project_type": project_type,
        "budget": budget,
        "timeline": timeline,
        "message": message,
    }
    errors = validate_contact_data(data)
    if errors:
        for error in errors:
            st.error(error)
        return

    try:
        ack = submit_contact_request(build_contact_request(data))
    except InvalidParameterError as e:
        st.error(str(e))
        return

    st.session_state["contact_submitted"] = ack.success
    st.success(ack.message)
