"""Guest and RSVP data models (Pydantic).

`Guest` mirrors a row of the guest list. `RsvpSubmission` is the payload sent when a guest answers
the invitation, and `ResponseRow` is one stored attendance record (the primary guest and,
optionally, their partner get separate rows).

Guest rows usually come from a hand-edited spreadsheet, so blank cells are accepted and replaced
with defaults instead of being rejected.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class InvitationType(StrEnum):
    """Known invitation types. Other sheet values are kept as text and get no label."""

    single = "single"
    couple = "couple"


class GuestGroup(StrEnum):
    """Known guest groups. The greeting is more formal for family."""

    family = "family"
    friends = "friends"


class RsvpStatus(StrEnum):
    """Whether the guest has already answered."""

    pending = "pending"
    responded = "responded"


class Attendance(StrEnum):
    """Attendance answers as they are stored in the responses table."""

    attending = "Приду"
    attending_with_partner = "Приду с партнёром"
    declined = "Не смогу"


PARTNER_ATTENDANCE = "Приду (партнёр)"


DRINK_KEYS: tuple[str, ...] = (
    "no_alcohol",
    "wine_white_dry",
    "wine_white_sweet",
    "wine_red_sweet",
    "wine_red_dry",
    "champagne_brut",
    "champagne_sweet",
    "cocktails_aperol",
    "cognac",
    "whiskey",
    "vodka",
    "cocktails_cola",
)

DRINK_LABELS: dict[str, str] = {
    "no_alcohol": "Не пью алкоголь",
    "wine_white_dry": "Белое сухое вино",
    "wine_white_sweet": "Белое сладкое вино",
    "wine_red_sweet": "Красное сладкое вино",
    "wine_red_dry": "Красное сухое вино",
    "champagne_brut": "Шампанское брют",
    "champagne_sweet": "Сладкое шампанское",
    "cocktails_aperol": "Апероль шприц",
    "cognac": "Коньяк",
    "whiskey": "Виски",
    "vodka": "Водка",
    "cocktails_cola": "Коктейли с колой",
}

NO_DIETARY = "—"


class Drinks(BaseModel):
    """Drink preferences as independent boolean flags."""

    model_config = ConfigDict(extra="ignore")

    no_alcohol: bool = False
    wine_white_dry: bool = False
    wine_white_sweet: bool = False
    wine_red_sweet: bool = False
    wine_red_dry: bool = False
    champagne_brut: bool = False
    champagne_sweet: bool = False
    cocktails_aperol: bool = False
    cognac: bool = False
    whiskey: bool = False
    vodka: bool = False
    cocktails_cola: bool = False

    def selected(self) -> list[str]:
        """Return the selected drink keys in their canonical order."""

        return [key for key in DRINK_KEYS if getattr(self, key)]


class Guest(BaseModel):
    """A guest record looked up by `guest_id`."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    guest_id: str
    name: str = ""
    full_name: str = ""
    invitation_type: str = InvitationType.single.value
    partner_name: str = ""
    partner_full_name: str = ""
    group: str = GuestGroup.friends.value
    custom_message: str = ""
    show_accommodation: bool = True
    show_alcohol: bool = True
    rsvp_status: RsvpStatus = RsvpStatus.pending

    @field_validator(
        "name",
        "full_name",
        "partner_name",
        "partner_full_name",
        "custom_message",
        mode="before",
    )
    @classmethod
    def blank_text(cls, value: Any) -> Any:
        """Treat missing text cells as empty strings."""

        return "" if value is None else value

    @field_validator("invitation_type", "group", "rsvp_status", mode="before")
    @classmethod
    def blank_choice(cls, value: Any, info: ValidationInfo) -> Any:
        """Fall back to the field default when the cell is empty."""

        if value is None or (isinstance(value, str) and not value.strip()):
            return cls.model_fields[info.field_name].default
        return value

    @field_validator("show_accommodation", "show_alcohol", mode="before")
    @classmethod
    def flag_defaults_to_true(cls, value: Any) -> Any:
        """Only an explicit false value hides a section."""

        if value is None or (isinstance(value, str) and not value.strip()):
            return True
        return value


class RsvpSubmission(BaseModel):
    """The answer a guest submits."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    name: str = ""
    attendance: Attendance
    dietary: str = NO_DIETARY
    accommodation: str = ""
    drinks: Drinks = Field(default_factory=Drinks)
    partner_name: str = ""
    partner_dietary: str = NO_DIETARY
    partner_drinks: Drinks = Field(default_factory=Drinks)
    guest_id: str | None = None

    @field_validator("dietary", "partner_dietary", mode="before")
    @classmethod
    def blank_dietary(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return NO_DIETARY
        return value

    @field_validator("name", "accommodation", "partner_name", mode="before")
    @classmethod
    def blank_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("guest_id", mode="before")
    @classmethod
    def blank_guest_id(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def brings_partner(self) -> bool:
        """Whether a separate partner row must be stored."""

        return bool(self.partner_name) and self.attendance == Attendance.attending_with_partner


class ResponseRow(BaseModel):
    """One stored attendance record."""

    model_config = ConfigDict(extra="forbid")

    timestamp: datetime
    guest_id: str
    name: str
    attendance: str
    dietary: str
    accommodation: str
    drinks: Drinks

    def values(self) -> tuple[Any, ...]:
        """Return column values in `responses` table order."""

        return (
            self.timestamp,
            self.guest_id,
            self.name,
            self.attendance,
            self.dietary,
            self.accommodation,
            *(getattr(self.drinks, key) for key in DRINK_KEYS),
        )


def guest_from_obj(obj: Any) -> Guest:
    """Validate and parse a Guest from a decoded row or JSON object."""

    return Guest.model_validate(obj)


def submission_from_obj(obj: Any) -> RsvpSubmission:
    """Validate and parse an RSVP submission from a decoded JSON object."""

    return RsvpSubmission.model_validate(obj)
