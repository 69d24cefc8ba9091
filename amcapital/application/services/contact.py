"""Lead capture.

Leads are logged for the sales team; nothing is persisted.
"""

from __future__ import annotations

from typing import Any, Mapping

from amcapital.core.exceptions import InvalidParameterError
from amcapital.core.logging import get_logger
from amcapital.core.validation import validate_contact_data
from amcapital.domain.models.contact import ContactAcknowledgement, ContactRequest

log = get_logger(__name__)

SUCCESS_MESSAGE = "Formulaire envoyé avec succès"


def build_contact_request(data: Mapping[str, Any]) -> ContactRequest:
    """Validate a raw form and build the request.

    Raises:
        InvalidParameterError: With the first failing message
    """
    errors = validate_contact_data(data)
    if errors:
        raise InvalidParameterError("contact_form", "; ".join(errors), errors[0])
    return ContactRequest.model_validate(dict(data))


def submit_contact_request(request: ContactRequest) -> ContactAcknowledgement:
    log.info(
        "lead_captured",
        project_type=request.project_type,
        budget=request.budget,
        timeline=request.timeline,
        email_domain=request.email.rsplit("@", 1)[-1],
    )
    return ContactAcknowledgement(success=True, message=SUCCESS_MESSAGE)
