"""Display strings derived from a guest record.

Every function accepts `None` (guest not loaded yet or not found) and then returns the neutral text
for the invitation page.
"""

from __future__ import annotations

from src.declension import Gender, infer_gender, to_genitive, to_instrumental
from src.guests.schema import Guest, GuestGroup, InvitationType, RsvpStatus


def is_couple(guest: Guest | None) -> bool:
    """Whether the invitation is for two and the partner is known by name."""

    return (
        guest is not None
        and guest.invitation_type == InvitationType.couple
        and bool(guest.partner_name)
    )


def display_name(guest: Guest | None) -> str:
    if guest is None or not guest.name:
        return ""
    if is_couple(guest):
        return f"{guest.name} и {guest.partner_name}"
    return guest.name


def greeting(guest: Guest | None) -> str:
    """Build the greeting line.

    Family members get the formal "Дорогой/Дорогая/Дорогие" salutation (gender is inferred from the
    first name for single guests); everyone else gets a casual "привет".
    """

    if guest is None or not guest.name:
        return ""
    name = display_name(guest)

    if guest.group == GuestGroup.family:
        if is_couple(guest):
            return f"Дорогие {name}!"
        salutation = "Дорогая" if infer_gender(guest.name) == Gender.feminine else "Дорогой"
        return f"{salutation} {name}!"

    return f"{name}, привет!"


def invitation_type_label(guest: Guest | None) -> str:
    if guest is None:
        return ""
    if guest.invitation_type == InvitationType.couple:
        return "Приглашение для двоих"
    if guest.invitation_type == InvitationType.single:
        return "Персональное приглашение"
    return ""


def guest_section_title(guest: Guest | None) -> str:
    if guest is None or not guest.name:
        return "Ваши предпочтения"
    return f"Предпочтения для {to_genitive(guest.name)}"


def partner_section_title(guest: Guest | None) -> str:
    if guest is None or not guest.partner_name:
        return "Предпочтения партнёра"
    return f"Предпочтения для {to_genitive(guest.partner_name)}"


def partner_companion_phrase(guest: Guest | None) -> str:
    """Return "вместе с <partner>" in the instrumental case, or "" without a partner."""

    if guest is None or not guest.partner_name:
        return ""
    return f"вместе с {to_instrumental(guest.partner_name)}"


def show_accommodation(guest: Guest | None) -> bool:
    return guest is None or guest.show_accommodation


def show_alcohol(guest: Guest | None) -> bool:
    return guest is None or guest.show_alcohol


def has_responded(guest: Guest | None) -> bool:
    return guest is not None and guest.rsvp_status == RsvpStatus.responded
