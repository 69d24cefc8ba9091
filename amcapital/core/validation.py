"""Input validation gate.

Runs before the engine: the calculator assumes its configuration already
passed ``validate_simulation_data``.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping

from amcapital.core.constants import INPUT_LIMITS
from amcapital.core.exceptions import InvalidConfigurationError
from amcapital.domain.models.contact import BUDGET_VALUES, EMAIL_PATTERN, PROJECT_TYPE_VALUES, TIMELINE_VALUES
from amcapital.domain.models.simulation import MODE_ALIASES, ExploitationMode, SimulationConfig, UnitType

PRICE_RANGE_MESSAGE = "Le prix doit être entre 50 000€ et 1 000 000€"
SURFACE_RANGE_MESSAGE = "La surface doit être entre 10m² et 200m²"
UNIT_TYPE_MESSAGE = "Type de bien invalide"
MODE_MESSAGE = "Type d'exploitation invalide"
CITY_MESSAGE = "Ville requise"
PROJECT_TYPE_MESSAGE = "Type de projet invalide"
BUDGET_MESSAGE = "Budget invalide"
TIMELINE_MESSAGE = "Calendrier invalide"

_UNIT_TYPES = {u.value for u in UnitType}
_MODES = {m.value for m in ExploitationMode}


def _first(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _in_range(value: float | None, limits: Mapping[str, float]) -> bool:
    return value is not None and limits["min"] <= value <= limits["max"]


def validate_simulation_data(data: Mapping[str, Any] | SimulationConfig) -> list[str]:
    """Check a raw simulation input.

    Args:
        data: Mapping with snake_case or camelCase keys, or a built config

    Returns:
        French error messages, empty when the input is valid
    """
    if isinstance(data, SimulationConfig):
        data = data.model_dump()

    errors: list[str] = []

    price = _as_number(_first(data, "price"))
    if not _in_range(price, INPUT_LIMITS["price"]):
        errors.append(PRICE_RANGE_MESSAGE)

    surface = _as_number(_first(data, "surface"))
    if not _in_range(surface, INPUT_LIMITS["surface"]):
        errors.append(SURFACE_RANGE_MESSAGE)

    unit_type = _first(data, "unit_type", "unitType", "rooms")
    if not isinstance(unit_type, str) or unit_type.strip().lower() not in _UNIT_TYPES:
        errors.append(UNIT_TYPE_MESSAGE)

    mode = _first(data, "exploitation_mode", "exploitationMode", "exploitationType")
    if isinstance(mode, ExploitationMode):
        mode = mode.value
    if not isinstance(mode, str) or MODE_ALIASES.get(mode.strip().lower(), mode.strip().lower()) not in _MODES:
        errors.append(MODE_MESSAGE)

    city = _first(data, "city")
    if not isinstance(city, str) or len(city.strip()) < 2:
        errors.append(CITY_MESSAGE)

    return errors


def build_simulation_config(data: Mapping[str, Any]) -> SimulationConfig:
    """Validate a raw input and build the configuration.

    Raises:
        InvalidConfigurationError: With every failing message
    """
    errors = validate_simulation_data(data)
    if errors:
        raise InvalidConfigurationError(errors)
    return SimulationConfig.model_validate(dict(data))


def validate_contact_data(data: Mapping[str, Any]) -> list[str]:
    """Check a contact form submission, French messages."""
    errors: list[str] = []

    def text(*keys: str) -> str:
        value = _first(data, *keys)
        return value.strip() if isinstance(value, str) else ""

    if not text("first_name", "firstName"):
        errors.append("Prénom requis")
    if not text("last_name", "lastName"):
        errors.append("Nom requis")

    email = text("email")
    if not email:
        errors.append("Email requis")
    elif not re.match(EMAIL_PATTERN, email):
        errors.append("Email invalide")

    if not text("phone"):
        errors.append("Téléphone requis")
    if not text("message"):
        errors.append("Message requis")

    project_type = _first(data, "project_type", "projectType")
    if project_type is not None and project_type not in PROJECT_TYPE_VALUES:
        errors.append(PROJECT_TYPE_MESSAGE)

    def answered(key: str) -> Any:
        # Optional selects: blank means "not answered"
        value = _first(data, key)
        return None if isinstance(value, str) and not value.strip() else value

    budget = answered("budget")
    if budget is not None and budget not in BUDGET_VALUES:
        errors.append(BUDGET_MESSAGE)
    timeline = answered("timeline")
    if timeline is not None and timeline not in TIMELINE_VALUES:
        errors.append(TIMELINE_MESSAGE)

    return errors
