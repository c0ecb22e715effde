"""RSVP form state.

`RsvpForm` holds the answers a guest has given so far and enforces the drink rules: choosing "no
alcohol" clears and disables every other drink option.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.guests.presenter import has_responded, is_couple
from src.guests.schema import (
    DRINK_KEYS,
    NO_DIETARY,
    Attendance,
    Drinks,
    Guest,
    RsvpSubmission,
)

NO_ALCOHOL = "no_alcohol"


class FormError(ValueError):
    """Raised when the form cannot be turned into a submission."""


def attendance_options(guest: Guest | None) -> list[tuple[str, str]]:
    """Return `(value, label)` pairs in display order; the empty value is the placeholder."""

    options = [
        ("", "Выберите ответ"),
        (Attendance.attending.value, "С радостью приду"),
    ]
    if is_couple(guest):
        options.append((Attendance.attending_with_partner.value, "Будем оба"))
    options.append((Attendance.declined.value, "К сожалению, не смогу"))
    return options


def _empty_drinks() -> dict[str, bool]:
    return dict.fromkeys(DRINK_KEYS, False)


def _toggle(drinks: dict[str, bool], key: str) -> None:
    if key not in drinks:
        raise KeyError(f"unknown drink option: {key}")
    if is_disabled(drinks, key):
        return
    drinks[key] = not drinks[key]
    if key == NO_ALCOHOL and drinks[NO_ALCOHOL]:
        for other in drinks:
            if other != NO_ALCOHOL:
                drinks[other] = False


def is_disabled(drinks: dict[str, bool], key: str) -> bool:
    """Whether the option is locked because "no alcohol" is selected."""

    return key != NO_ALCOHOL and drinks.get(NO_ALCOHOL, False)


@dataclass
class RsvpForm:
    """Mutable answers for one guest."""

    guest: Guest | None = None
    attendance: str = ""
    dietary: str = ""
    accommodation: str = ""
    drinks: dict[str, bool] = field(default_factory=_empty_drinks)
    partner_dietary: str = ""
    partner_drinks: dict[str, bool] = field(default_factory=_empty_drinks)
    submitted: bool = False
    show_form: bool = True

    def __post_init__(self) -> None:
        if has_responded(self.guest):
            self.show_form = False

    @property
    def can_attend(self) -> bool:
        return self.attendance != "" and self.attendance != Attendance.declined

    @property
    def show_partner_section(self) -> bool:
        return is_couple(self.guest) and self.attendance == Attendance.attending_with_partner

    def toggle_drink(self, key: str) -> None:
        _toggle(self.drinks, key)

    def toggle_partner_drink(self, key: str) -> None:
        _toggle(self.partner_drinks, key)

    def is_drink_disabled(self, key: str) -> bool:
        return is_disabled(self.drinks, key)

    def is_partner_drink_disabled(self, key: str) -> bool:
        return is_disabled(self.partner_drinks, key)

    def change_response(self) -> None:
        """Re-open the form after a previous answer."""

        self.show_form = True
        self.submitted = False

    def mark_submitted(self) -> None:
        self.submitted = True
        self.show_form = False

    def to_submission(self) -> RsvpSubmission:
        """Build the payload for the response store.

        Raises:
            FormError: If no attendance answer has been chosen.
        """

        if not self.attendance:
            raise FormError("attendance is required")

        guest = self.guest
        return RsvpSubmission(
            name=guest.full_name if guest else "",
            attendance=Attendance(self.attendance),
            dietary=self.dietary or NO_DIETARY,
            accommodation=self.accommodation,
            drinks=Drinks(**self.drinks),
            partner_name=guest.partner_full_name if guest else "",
            partner_dietary=self.partner_dietary or NO_DIETARY,
            partner_drinks=Drinks(**self.partner_drinks),
            guest_id=guest.guest_id if guest else None,
        )
