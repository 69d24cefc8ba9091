"""Lead capture model."""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import AliasChoices, BaseModel, Field, field_validator

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"

ProjectType = Literal["investment", "advice", "management", "other"]
BudgetRange = Literal["0-100k", "100k-250k", "250k-500k", "500k-1M", "1M+"]
Timeline = Literal["immediate", "1-3months", "3-6months", "6-12months", "12months+"]

PROJECT_TYPE_VALUES: tuple[str, ...] = get_args(ProjectType)
BUDGET_VALUES: tuple[str, ...] = get_args(BudgetRange)
TIMELINE_VALUES: tuple[str, ...] = get_args(Timeline)


class ContactRequest(BaseModel):
    """Contact form submission.

    Use ``amcapital.core.validation.validate_contact_data`` first to get
    user-facing messages; the constraints below only guard construction.
    """

    first_name: str = Field(..., min_length=1, validation_alias=AliasChoices("first_name", "firstName"))
    last_name: str = Field(..., min_length=1, validation_alias=AliasChoices("last_name", "lastName"))
    email: str = Field(..., pattern=EMAIL_PATTERN)
    phone: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    project_type: ProjectType = Field(
        default="investment",
        validation_alias=AliasChoices("project_type", "projectType"),
    )
    budget: BudgetRange | None = None
    timeline: Timeline | None = None

    model_config = {
        "frozen": True,
        "str_strip_whitespace": True,
        "extra": "ignore",
    }

    @field_validator("budget", "timeline", mode="before")
    @classmethod
    def blank_as_none(cls, v):
        # Unselected dropdowns submit ""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ContactAcknowledgement(BaseModel):
    success: bool
    message: str

    model_config = {"frozen": True}
