"""Bot router composition.

Registration order matters: the catch-all fallback must stay last.
"""

from __future__ import annotations

from aiogram import F, Router
from aiogram.filters import CommandStart, StateFilter

from src.bot.flow import RsvpStates
from src.bot.handlers import (
    handle_accommodation,
    handle_attendance,
    handle_change_response,
    handle_dietary,
    handle_drink_toggle,
    handle_drinks_done,
    handle_fallback,
    handle_partner_dietary,
    handle_retry,
    handle_stale_callback,
    handle_start,
)
from src.bot.keyboards import (
    AttendanceCallback,
    ChangeResponseCallback,
    DrinkCallback,
    DrinksDoneCallback,
    RetryCallback,
)

router = Router(name="rsvp")

router.message.register(handle_start, CommandStart())
router.message.register(handle_dietary, StateFilter(RsvpStates.dietary), F.text)
router.message.register(handle_accommodation, StateFilter(RsvpStates.accommodation), F.text)
router.message.register(handle_partner_dietary, StateFilter(RsvpStates.partner_dietary), F.text)
router.message.register(handle_fallback)

router.callback_query.register(handle_change_response, ChangeResponseCallback.filter())
router.callback_query.register(
    handle_attendance,
    AttendanceCallback.filter(),
    StateFilter(RsvpStates.attendance),
)
router.callback_query.register(
    handle_drink_toggle,
    DrinkCallback.filter(),
    StateFilter(RsvpStates.drinks, RsvpStates.partner_drinks),
)
router.callback_query.register(
    handle_drinks_done,
    DrinksDoneCallback.filter(),
    StateFilter(RsvpStates.drinks, RsvpStates.partner_drinks),
)
router.callback_query.register(handle_retry, RetryCallback.filter(), StateFilter(RsvpStates.failed))
router.callback_query.register(handle_stale_callback)
