"""Bot message texts."""

from __future__ import annotations

from src.guests.form import RsvpForm
from src.guests.presenter import (
    greeting,
    guest_section_title,
    invitation_type_label,
    partner_companion_phrase,
    partner_section_title,
)
from src.guests.schema import Attendance, Guest

NO_LINK = "Откройте, пожалуйста, персональную ссылку из приглашения."
NOT_FOUND = "Приглашение не найдено. Проверьте ссылку из приглашения."
ERROR = "Произошла ошибка. Попробуйте ещё раз."
ALREADY_RESPONDED = "Вы уже ответили на приглашение. Спасибо!"
ASK_ATTENDANCE = "Сможете ли вы прийти?"
ASK_DIETARY = "Есть ли пожелания по питанию? Напишите их или отправьте «-», если нет."
ASK_ACCOMMODATION = "Нужно ли вам жильё? Напишите, пожалуйста, ответ."
ASK_DRINKS = "Что вы предпочитаете пить? Отметьте варианты и нажмите «Готово»."
ANSWER_ABOVE = "Пожалуйста, ответьте на вопрос выше."
STALE_BUTTON = "Этот вопрос уже неактуален."

_SKIP_ANSWERS = frozenset({"-", "—", "нет", "no"})


def invitation_text(guest: Guest) -> str:
    """Greeting, invitation label and the personal note, one per paragraph."""

    parts = [greeting(guest), invitation_type_label(guest), guest.custom_message]
    return "\n\n".join(part for part in parts if part)


def dietary_question(form: RsvpForm, *, partner: bool = False) -> str:
    if partner:
        return f"{partner_section_title(form.guest)}\n\n{ASK_DIETARY}"
    if form.show_partner_section:
        return f"{guest_section_title(form.guest)}\n\n{ASK_DIETARY}"
    return ASK_DIETARY


def drinks_question(form: RsvpForm, *, partner: bool = False) -> str:
    if partner:
        return f"{partner_section_title(form.guest)}\n\n{ASK_DRINKS}"
    return ASK_DRINKS


def free_text_answer(text: str | None) -> str:
    """Return the stripped answer, or "" when the guest skipped the question."""

    value = (text or "").strip()
    if value.lower() in _SKIP_ANSWERS:
        return ""
    return value


def thank_you_text(form: RsvpForm) -> str:
    if form.attendance == Attendance.declined:
        return "Очень жаль, что вы не сможете прийти. Спасибо, что ответили!"
    if form.show_partner_section:
        return f"Спасибо! Ждём вас {partner_companion_phrase(form.guest)}!"
    return "Спасибо! Ждём вас на празднике!"
