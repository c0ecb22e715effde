"""Step order of the RSVP conversation.

The bot asks one question per step. Which steps are asked depends on the guest record (accommodation
and alcohol sections can be hidden) and on the attendance answer (declining skips every preference
question; the partner steps only appear for "Приду с партнёром").

The form travels between updates in FSM storage as a plain dict.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Any

from aiogram.fsm.state import State, StatesGroup

from src.guests.form import RsvpForm
from src.guests.presenter import show_accommodation, show_alcohol
from src.guests.schema import DRINK_KEYS, guest_from_obj


class Step(StrEnum):
    """Conversation steps in the order they are asked."""

    attendance = "attendance"
    dietary = "dietary"
    accommodation = "accommodation"
    drinks = "drinks"
    partner_dietary = "partner_dietary"
    partner_drinks = "partner_drinks"
    submit = "submit"


class RsvpStates(StatesGroup):
    attendance = State()
    dietary = State()
    accommodation = State()
    drinks = State()
    partner_dietary = State()
    partner_drinks = State()
    failed = State()


STEP_STATES: dict[Step, State] = {
    Step.attendance: RsvpStates.attendance,
    Step.dietary: RsvpStates.dietary,
    Step.accommodation: RsvpStates.accommodation,
    Step.drinks: RsvpStates.drinks,
    Step.partner_dietary: RsvpStates.partner_dietary,
    Step.partner_drinks: RsvpStates.partner_drinks,
}

_STEP_ORDER: tuple[Step, ...] = tuple(Step)

_STEP_CONDITIONS: dict[Step, Callable[[RsvpForm], bool]] = {
    Step.attendance: lambda form: True,
    Step.dietary: lambda form: form.can_attend,
    Step.accommodation: lambda form: form.can_attend and show_accommodation(form.guest),
    Step.drinks: lambda form: form.can_attend and show_alcohol(form.guest),
    Step.partner_dietary: lambda form: form.show_partner_section,
    Step.partner_drinks: lambda form: form.show_partner_section and show_alcohol(form.guest),
    Step.submit: lambda form: True,
}


def next_step(form: RsvpForm, current: Step) -> Step:
    """Return the first step after `current` that applies to this form."""

    index = _STEP_ORDER.index(current)
    for step in _STEP_ORDER[index + 1:]:
        if _STEP_CONDITIONS[step](form):
            return step
    return Step.submit


def form_to_data(form: RsvpForm) -> dict[str, Any]:
    """Serialize the form for FSM storage."""

    return {
        "guest": form.guest.model_dump(mode="json") if form.guest else None,
        "attendance": form.attendance,
        "dietary": form.dietary,
        "accommodation": form.accommodation,
        "drinks": dict(form.drinks),
        "partner_dietary": form.partner_dietary,
        "partner_drinks": dict(form.partner_drinks),
    }


def form_from_data(data: dict[str, Any]) -> RsvpForm:
    """Rebuild the form from FSM storage (missing keys fall back to an empty form)."""

    raw_guest = data.get("guest")
    form = RsvpForm(guest=guest_from_obj(raw_guest) if raw_guest else None)
    form.attendance = data.get("attendance", "")
    form.dietary = data.get("dietary", "")
    form.accommodation = data.get("accommodation", "")
    form.drinks.update({k: bool(v) for k, v in data.get("drinks", {}).items() if k in DRINK_KEYS})
    form.partner_dietary = data.get("partner_dietary", "")
    form.partner_drinks.update(
        {k: bool(v) for k, v in data.get("partner_drinks", {}).items() if k in DRINK_KEYS}
    )
    # Restored forms are being edited; the "already responded" lock only applies on first load.
    form.show_form = True
    return form
