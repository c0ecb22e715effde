"""Tests for guest and RSVP payload validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.guests.schema import (
    NO_DIETARY,
    Attendance,
    Drinks,
    InvitationType,
    RsvpStatus,
    guest_from_obj,
    submission_from_obj,
)


def test_guest_blank_cells_take_defaults() -> None:
    guest = guest_from_obj(
        {
            "guest_id": "g1",
            "name": None,
            "invitation_type": "",
            "group": " ",
            "show_accommodation": None,
            "show_alcohol": "",
            "rsvp_status": None,
        }
    )

    assert guest.name == ""
    assert guest.invitation_type == InvitationType.single
    assert guest.group == "friends"
    assert guest.show_accommodation is True
    assert guest.show_alcohol is True
    assert guest.rsvp_status == RsvpStatus.pending


def test_guest_explicit_false_flag_is_kept() -> None:
    guest = guest_from_obj({"guest_id": "g1", "show_alcohol": False, "show_accommodation": "false"})

    assert guest.show_alcohol is False
    assert guest.show_accommodation is False


def test_guest_unknown_group_is_kept_as_text() -> None:
    assert guest_from_obj({"guest_id": "g1", "group": "colleagues"}).group == "colleagues"


def test_guest_requires_id() -> None:
    with pytest.raises(ValidationError):
        guest_from_obj({"name": "Анна"})


def test_submission_defaults() -> None:
    submission = submission_from_obj({"attendance": "Приду", "dietary": "", "guest_id": ""})

    assert submission.attendance == Attendance.attending
    assert submission.dietary == NO_DIETARY
    assert submission.partner_dietary == NO_DIETARY
    assert submission.guest_id is None
    assert submission.drinks == Drinks()


def test_submission_rejects_unknown_attendance() -> None:
    with pytest.raises(ValidationError):
        submission_from_obj({"attendance": "Может быть"})


def test_submission_ignores_unknown_drink_keys() -> None:
    submission = submission_from_obj(
        {"attendance": "Приду", "drinks": {"vodka": True, "absinthe": True}}
    )

    assert submission.drinks.selected() == ["vodka"]


def test_brings_partner_requires_name_and_answer() -> None:
    base = {"attendance": "Приду с партнёром", "partner_name": "Илья Петров"}

    assert submission_from_obj(base).brings_partner
    assert not submission_from_obj({**base, "partner_name": ""}).brings_partner
    assert not submission_from_obj({**base, "attendance": "Приду"}).brings_partner
