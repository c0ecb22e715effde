"""Inline keyboards and their callback data."""

from __future__ import annotations

from aiogram.filters.callback_data import CallbackData
from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

from src.guests.form import attendance_options, is_disabled
from src.guests.schema import DRINK_KEYS, DRINK_LABELS, Guest


class AttendanceCallback(CallbackData, prefix="att"):
    value: str


class DrinkCallback(CallbackData, prefix="drink"):
    key: str
    partner: bool = False


class DrinksDoneCallback(CallbackData, prefix="drinks_done"):
    partner: bool = False


class ChangeResponseCallback(CallbackData, prefix="change"):
    pass


class RetryCallback(CallbackData, prefix="retry"):
    pass


def attendance_keyboard(guest: Guest | None) -> InlineKeyboardMarkup:
    buttons = [
        [InlineKeyboardButton(text=label, callback_data=AttendanceCallback(value=value).pack())]
        for value, label in attendance_options(guest)
        if value
    ]
    return InlineKeyboardMarkup(inline_keyboard=buttons)


def _drink_button_text(drinks: dict[str, bool], key: str) -> str:
    if is_disabled(drinks, key):
        mark = "🚫"
    elif drinks.get(key):
        mark = "✅"
    else:
        mark = "▫️"
    return f"{mark} {DRINK_LABELS[key]}"


def drinks_keyboard(drinks: dict[str, bool], *, partner: bool = False) -> InlineKeyboardMarkup:
    """One toggle button per drink option, plus a "done" button."""

    buttons = [
        [
            InlineKeyboardButton(
                text=_drink_button_text(drinks, key),
                callback_data=DrinkCallback(key=key, partner=partner).pack(),
            )
        ]
        for key in DRINK_KEYS
    ]
    buttons.append(
        [
            InlineKeyboardButton(
                text="Готово",
                callback_data=DrinksDoneCallback(partner=partner).pack(),
            )
        ]
    )
    return InlineKeyboardMarkup(inline_keyboard=buttons)


def change_response_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [
                InlineKeyboardButton(
                    text="Изменить ответ",
                    callback_data=ChangeResponseCallback().pack(),
                )
            ]
        ]
    )


def retry_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [InlineKeyboardButton(text="Отправить ещё раз", callback_data=RetryCallback().pack())]
        ]
    )
