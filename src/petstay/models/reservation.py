"""Reservation models for the booking form and the reservation log."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Wire names of the fields every reservation must carry, in display order
REQUIRED_FIELDS: tuple[str, ...] = (
    "owner-name",
    "email",
    "hamster-name",
    "check-in",
    "check-out",
)


class ReservationRequest(BaseModel):
    """A reservation form submission.

    Fields are only populated from the form's wire names (aliases), never
    from the Python attribute names. Extra fields are kept so the
    accepted payload can be logged as submitted, but nothing validates them.
    """

    model_config = ConfigDict(
        extra="allow",
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "owner-name": "Ada Lovelace",
                    "email": "ada@example.com",
                    "hamster-name": "Fluffy",
                    "check-in": "2026-07-15",
                    "check-out": "2026-07-22",
                }
            ]
        },
    )

    owner_name: str = Field(default="", alias="owner-name", description="Owner's full name")
    email: str = Field(default="", description="Contact email")
    pet_name: str = Field(default="", alias="hamster-name", description="Pet's name")
    check_in: str = Field(default="", alias="check-in", description="Check-in date (YYYY-MM-DD)")
    check_out: str = Field(default="", alias="check-out", description="Check-out date (YYYY-MM-DD)")

    @field_validator("owner_name", "email", "pet_name", "check_in", "check_out", mode="before")
    @classmethod
    def coerce_to_text(cls, value: Any) -> str:
        """Treat null as blank and render JSON scalars as text."""
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def field_value(self, wire_name: str) -> str:
        """Get a declared field by its wire name."""
        for name, info in type(self).model_fields.items():
            if (info.alias or name) == wire_name:
                return getattr(self, name)
        raise KeyError(wire_name)


class DateField(str, Enum):
    """Date fields a stay policy violation can point at."""

    CHECK_IN = "checkIn"
    CHECK_OUT = "checkOut"


class PolicyViolation(BaseModel):
    """A single stay policy rule that a pair of dates breaks."""

    model_config = ConfigDict(strict=True, frozen=True)

    field: DateField
    message: str


class ValidationOutcome(BaseModel):
    """Ordered list of validation errors; empty means acceptable."""

    model_config = ConfigDict(strict=True)

    errors: list[str] = Field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return not self.errors

    @property
    def primary(self) -> str | None:
        """First error, shown to the guest as the headline message."""
        return self.errors[0] if self.errors else None


class ReservationRecord(BaseModel):
    """One line of the reservation log."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    created_at: datetime = Field(..., alias="createdAt")
    reservation: dict[str, Any] = Field(..., description="Accepted payload as submitted")

    def to_log_line(self) -> str:
        """Serialize as a single NDJSON line, trailing newline included."""
        return self.model_dump_json(by_alias=True) + "\n"


class ReservationAccepted(BaseModel):
    """Response body for an accepted reservation request."""

    model_config = ConfigDict(strict=True)

    message: str


class StayPolicyResponse(BaseModel):
    """Booking window the reservation form should offer."""

    model_config = ConfigDict(populate_by_name=True)

    min_lead_days: int = Field(..., alias="minLeadDays", ge=0)
    today: str = Field(..., description="Server's calendar day (YYYY-MM-DD)")
    earliest_check_in: str = Field(..., alias="earliestCheckIn")
