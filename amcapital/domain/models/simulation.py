"""Simulation input model.

A configuration describes one hypothetical purchase: price, surface,
unit type, city and how the property is rented out.
"""

from __future__ import annotations

from enum import Enum

from pydantic import AliasChoices, BaseModel, Field, field_validator


class UnitType(str, Enum):
    """Property size class, drives the rent coefficient."""

    STUDIO = "studio"
    T2 = "t2"
    T3 = "t3"
    T4 = "t4"


class ExploitationMode(str, Enum):
    """Long-term lease vs. short-term (Airbnb) rental."""

    LONG_TERM = "long_term"
    SHORT_TERM = "short_term"


# Short keys used by the web form
MODE_ALIASES = {
    "long": ExploitationMode.LONG_TERM.value,
    "short": ExploitationMode.SHORT_TERM.value,
}


class SimulationConfig(BaseModel):
    """Property purchase to evaluate.

    Ranges are not enforced here: ``amcapital.core.validation`` is the gate
    that runs before a configuration reaches the engine.
    """

    price: float = Field(..., description="Purchase price in €")
    surface: float = Field(..., description="Surface in m²")
    unit_type: str = Field(
        default=UnitType.T2.value,
        validation_alias=AliasChoices("unit_type", "unitType", "rooms"),
        serialization_alias="unitType",
        description="studio, t2, t3 or t4",
    )
    exploitation_mode: ExploitationMode = Field(
        default=ExploitationMode.LONG_TERM,
        validation_alias=AliasChoices("exploitation_mode", "exploitationMode", "exploitationType"),
        serialization_alias="exploitationMode",
        description="long_term or short_term",
    )
    city: str = Field(default="paris", description="City name, case-insensitive")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

    @field_validator("unit_type", mode="before")
    @classmethod
    def normalize_unit_type(cls, v: object) -> object:
        """Lower-case the unit type; unknown values are kept as-is."""
        if isinstance(v, UnitType):
            return v.value
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("exploitation_mode", mode="before")
    @classmethod
    def normalize_mode(cls, v: object) -> object:
        if isinstance(v, str) and not isinstance(v, ExploitationMode):
            key = v.strip().lower()
            return MODE_ALIASES.get(key, key)
        return v

    @property
    def is_short_term(self) -> bool:
        return self.exploitation_mode is ExploitationMode.SHORT_TERM
