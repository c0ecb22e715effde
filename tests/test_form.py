"""Tests for RSVP form state and drink rules."""

from __future__ import annotations

import pytest

from src.guests.form import FormError, RsvpForm, attendance_options
from src.guests.schema import NO_DIETARY, Attendance, RsvpStatus, guest_from_obj

_COUPLE = guest_from_obj(
    {
        "guest_id": "c1",
        "name": "Анна",
        "full_name": "Анна Иванова",
        "invitation_type": "couple",
        "partner_name": "Илья",
        "partner_full_name": "Илья Петров",
    }
)
_SINGLE = guest_from_obj({"guest_id": "s1", "name": "Игорь", "full_name": "Игорь Смирнов"})


def test_attendance_options_offer_partner_choice_only_to_couples() -> None:
    couple_values = [value for value, _label in attendance_options(_COUPLE)]
    single_values = [value for value, _label in attendance_options(_SINGLE)]

    assert couple_values == ["", "Приду", "Приду с партнёром", "Не смогу"]
    assert single_values == ["", "Приду", "Не смогу"]


def test_can_attend() -> None:
    form = RsvpForm(guest=_SINGLE)
    assert not form.can_attend

    form.attendance = Attendance.declined.value
    assert not form.can_attend

    form.attendance = Attendance.attending.value
    assert form.can_attend


def test_partner_section_requires_couple_and_partner_answer() -> None:
    form = RsvpForm(guest=_COUPLE, attendance=Attendance.attending.value)
    assert not form.show_partner_section

    form.attendance = Attendance.attending_with_partner.value
    assert form.show_partner_section

    single = RsvpForm(guest=_SINGLE, attendance=Attendance.attending_with_partner.value)
    assert not single.show_partner_section


def test_no_alcohol_clears_and_locks_other_drinks() -> None:
    form = RsvpForm(guest=_SINGLE)
    form.toggle_drink("wine_red_dry")
    form.toggle_drink("whiskey")

    form.toggle_drink("no_alcohol")

    assert form.drinks["no_alcohol"]
    assert not form.drinks["wine_red_dry"]
    assert not form.drinks["whiskey"]
    assert form.is_drink_disabled("vodka")
    assert not form.is_drink_disabled("no_alcohol")

    form.toggle_drink("vodka")
    assert not form.drinks["vodka"]

    form.toggle_drink("no_alcohol")
    assert not form.is_drink_disabled("vodka")


def test_partner_drinks_are_independent() -> None:
    form = RsvpForm(guest=_COUPLE)
    form.toggle_partner_drink("no_alcohol")
    form.toggle_drink("cognac")

    assert form.drinks["cognac"]
    assert form.is_partner_drink_disabled("cognac")
    assert not form.is_drink_disabled("cognac")


def test_unknown_drink_key_raises() -> None:
    with pytest.raises(KeyError):
        RsvpForm().toggle_drink("absinthe")


def test_responded_guest_starts_with_closed_form() -> None:
    guest = _SINGLE.model_copy(update={"rsvp_status": RsvpStatus.responded})
    form = RsvpForm(guest=guest)
    assert not form.show_form

    form.change_response()
    assert form.show_form
    assert not form.submitted


def test_to_submission_uses_full_names_and_dash_for_blank_dietary() -> None:
    form = RsvpForm(guest=_COUPLE, attendance=Attendance.attending_with_partner.value)
    form.accommodation = "Нужен номер"
    form.toggle_partner_drink("champagne_brut")

    submission = form.to_submission()

    assert submission.name == "Анна Иванова"
    assert submission.partner_name == "Илья Петров"
    assert submission.dietary == NO_DIETARY
    assert submission.partner_dietary == NO_DIETARY
    assert submission.accommodation == "Нужен номер"
    assert submission.partner_drinks.selected() == ["champagne_brut"]
    assert submission.guest_id == "c1"


def test_to_submission_requires_attendance() -> None:
    with pytest.raises(FormError):
        RsvpForm(guest=_SINGLE).to_submission()
