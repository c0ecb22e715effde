"""Tests for greeting and section titles built from a guest record."""

from __future__ import annotations

from typing import Any

from src.guests import presenter
from src.guests.schema import Guest, guest_from_obj


def _guest(**fields: Any) -> Guest:
    return guest_from_obj({"guest_id": "g1", **fields})


def test_display_name_for_couple_and_single() -> None:
    couple = _guest(name="Анна", invitation_type="couple", partner_name="Дмитрий")
    single = _guest(name="Анна", partner_name="Дмитрий")

    assert presenter.display_name(couple) == "Анна и Дмитрий"
    assert presenter.display_name(single) == "Анна"
    assert presenter.display_name(_guest()) == ""
    assert presenter.display_name(None) == ""


def test_family_greeting_uses_gendered_salutation() -> None:
    assert presenter.greeting(_guest(name="Анна", group="family")) == "Дорогая Анна!"
    assert presenter.greeting(_guest(name="Игорь", group="family")) == "Дорогой Игорь!"
    assert presenter.greeting(_guest(name="Любовь", group="family")) == "Дорогая Любовь!"


def test_family_greeting_for_couple_is_plural() -> None:
    guest = _guest(name="Анна", group="family", invitation_type="couple", partner_name="Игорь")

    assert presenter.greeting(guest) == "Дорогие Анна и Игорь!"


def test_friends_greeting_is_casual() -> None:
    assert presenter.greeting(_guest(name="Игорь")) == "Игорь, привет!"
    assert presenter.greeting(_guest()) == ""
    assert presenter.greeting(None) == ""


def test_invitation_type_label() -> None:
    couple = _guest(invitation_type="couple")

    assert presenter.invitation_type_label(couple) == "Приглашение для двоих"
    assert presenter.invitation_type_label(_guest()) == "Персональное приглашение"
    assert presenter.invitation_type_label(None) == ""
    assert presenter.invitation_type_label(_guest(invitation_type="vip")) == ""


def test_section_titles_use_genitive() -> None:
    guest = _guest(name="Мария", partner_name="Андрей", invitation_type="couple")

    assert presenter.guest_section_title(guest) == "Предпочтения для Марии"
    assert presenter.partner_section_title(guest) == "Предпочтения для Андрея"
    assert presenter.guest_section_title(None) == "Ваши предпочтения"
    assert presenter.partner_section_title(_guest(name="Мария")) == "Предпочтения партнёра"


def test_partner_companion_phrase_uses_instrumental() -> None:
    guest = _guest(name="Анна", partner_name="Илья", invitation_type="couple")

    assert presenter.partner_companion_phrase(guest) == "вместе с Ильёй"
    assert presenter.partner_companion_phrase(_guest(name="Анна")) == ""


def test_is_couple_requires_partner_name() -> None:
    assert presenter.is_couple(_guest(invitation_type="couple", partner_name="Илья"))
    assert not presenter.is_couple(_guest(invitation_type="couple"))
    assert not presenter.is_couple(None)


def test_visibility_flags_and_status() -> None:
    assert presenter.show_accommodation(None)
    assert presenter.show_alcohol(_guest())
    assert not presenter.show_alcohol(_guest(show_alcohol=False))
    assert presenter.has_responded(_guest(rsvp_status="responded"))
    assert not presenter.has_responded(_guest())
    assert not presenter.has_responded(None)
