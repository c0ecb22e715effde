"""aiogram handlers for the RSVP conversation.

A guest arrives through a deep link (`/start <guest_id>`), gets a personal greeting and answers one
question per step. Answers are kept in FSM storage until the last step, then written in a single
transaction. If the write fails the answers are kept and the guest can resubmit.

Handler boundary: internal errors are logged and the guest gets a short apology, never a traceback.
"""

from __future__ import annotations

import logging
from time import monotonic

from aiogram.filters import CommandObject
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from src.app import App
from src.bot import texts
from src.bot.flow import STEP_STATES, RsvpStates, Step, form_from_data, form_to_data, next_step
from src.bot.keyboards import (
    AttendanceCallback,
    DrinkCallback,
    DrinksDoneCallback,
    attendance_keyboard,
    change_response_keyboard,
    drinks_keyboard,
    retry_keyboard,
)
from src.db.pool import get_conn
from src.guests.form import RsvpForm
from src.guests.schema import Attendance
from src.rsvp.service import GuestNotFoundError, MissingGuestIdError, load_guest, submit_rsvp

logger = logging.getLogger(__name__)


def _callback_message(callback: CallbackQuery) -> Message | None:
    message = callback.message
    return message if isinstance(message, Message) else None


async def _load_form(state: FSMContext) -> RsvpForm:
    return form_from_data(await state.get_data())


async def _save_form(state: FSMContext, form: RsvpForm) -> None:
    await state.set_data(form_to_data(form))


async def _ask(message: Message, state: FSMContext, form: RsvpForm, step: Step, app: App) -> None:
    """Send the question for `step` (or submit) and move the FSM there."""

    if step == Step.submit:
        await _submit(message, state, form, app)
        return

    await _save_form(state, form)
    await state.set_state(STEP_STATES[step])

    if step == Step.attendance:
        await message.answer(texts.ASK_ATTENDANCE, reply_markup=attendance_keyboard(form.guest))
    elif step == Step.dietary:
        await message.answer(texts.dietary_question(form))
    elif step == Step.accommodation:
        await message.answer(texts.ASK_ACCOMMODATION)
    elif step == Step.drinks:
        await message.answer(
            texts.drinks_question(form),
            reply_markup=drinks_keyboard(form.drinks),
        )
    elif step == Step.partner_dietary:
        await message.answer(texts.dietary_question(form, partner=True))
    elif step == Step.partner_drinks:
        await message.answer(
            texts.drinks_question(form, partner=True),
            reply_markup=drinks_keyboard(form.partner_drinks, partner=True),
        )


async def _submit(message: Message, state: FSMContext, form: RsvpForm, app: App) -> None:
    started = monotonic()
    guest_id = form.guest.guest_id if form.guest else "-"

    # noinspection PyBroadException
    try:
        submission = form.to_submission()
        async with get_conn(app.pool) as conn:
            rows = await submit_rsvp(conn, submission)
    except Exception:
        logger.exception("rsvp submit failed guest_id=%s", guest_id)
        await _save_form(state, form)
        await state.set_state(RsvpStates.failed)
        await message.answer(texts.ERROR, reply_markup=retry_keyboard())
        return

    form.mark_submitted()
    await state.clear()
    await message.answer(texts.thank_you_text(form))

    latency_ms = int((monotonic() - started) * 1000)
    logger.info("handled rsvp guest_id=%s rows=%d latency_ms=%d", guest_id, len(rows), latency_ms)


async def handle_start(
        message: Message,
        command: CommandObject,
        state: FSMContext,
        app: App,
) -> None:
    """Open the personal invitation identified by the deep-link payload."""

    await state.clear()

    # noinspection PyBroadException
    try:
        async with get_conn(app.pool) as conn:
            guest = await load_guest(conn, command.args)
    except MissingGuestIdError:
        await message.answer(texts.NO_LINK)
        return
    except GuestNotFoundError as exc:
        logger.info("unknown guest guest_id=%s", exc.guest_id)
        await message.answer(texts.NOT_FOUND)
        return
    except Exception:
        logger.exception("guest lookup failed")
        await message.answer(texts.ERROR)
        return

    logger.info("invitation opened guest_id=%s", guest.guest_id)
    form = RsvpForm(guest=guest)
    await message.answer(texts.invitation_text(guest))

    if not form.show_form:
        await _save_form(state, form)
        await message.answer(texts.ALREADY_RESPONDED, reply_markup=change_response_keyboard())
        return

    await _ask(message, state, form, Step.attendance, app)


async def handle_change_response(callback: CallbackQuery, state: FSMContext, app: App) -> None:
    await callback.answer()
    message = _callback_message(callback)
    if message is None:
        return

    form = await _load_form(state)
    if form.guest is None:
        await message.answer(texts.NO_LINK)
        return
    form.change_response()
    await _ask(message, state, form, Step.attendance, app)


async def handle_attendance(
        callback: CallbackQuery,
        callback_data: AttendanceCallback,
        state: FSMContext,
        app: App,
) -> None:
    await callback.answer()
    message = _callback_message(callback)
    if message is None:
        return

    form = await _load_form(state)
    try:
        form.attendance = Attendance(callback_data.value).value
    except ValueError:
        logger.info("unsupported attendance value=%r", callback_data.value)
        return

    await _ask(message, state, form, next_step(form, Step.attendance), app)


async def handle_dietary(message: Message, state: FSMContext, app: App) -> None:
    form = await _load_form(state)
    form.dietary = texts.free_text_answer(message.text)
    await _ask(message, state, form, next_step(form, Step.dietary), app)


async def handle_accommodation(message: Message, state: FSMContext, app: App) -> None:
    form = await _load_form(state)
    form.accommodation = texts.free_text_answer(message.text)
    await _ask(message, state, form, next_step(form, Step.accommodation), app)


async def handle_partner_dietary(message: Message, state: FSMContext, app: App) -> None:
    form = await _load_form(state)
    form.partner_dietary = texts.free_text_answer(message.text)
    await _ask(message, state, form, next_step(form, Step.partner_dietary), app)


async def handle_drink_toggle(
        callback: CallbackQuery,
        callback_data: DrinkCallback,
        state: FSMContext,
) -> None:
    """Flip one drink option and redraw the keyboard in place."""

    form = await _load_form(state)
    drinks = form.partner_drinks if callback_data.partner else form.drinks

    if callback_data.key not in drinks:
        await callback.answer()
        return
    if callback_data.partner:
        disabled = form.is_partner_drink_disabled(callback_data.key)
    else:
        disabled = form.is_drink_disabled(callback_data.key)
    if disabled:
        await callback.answer("Вы отметили, что не пьёте алкоголь")
        return

    if callback_data.partner:
        form.toggle_partner_drink(callback_data.key)
    else:
        form.toggle_drink(callback_data.key)
    await _save_form(state, form)
    await callback.answer()

    message = _callback_message(callback)
    if message is not None:
        await message.edit_reply_markup(
            reply_markup=drinks_keyboard(drinks, partner=callback_data.partner),
        )


async def handle_drinks_done(
        callback: CallbackQuery,
        callback_data: DrinksDoneCallback,
        state: FSMContext,
        app: App,
) -> None:
    await callback.answer()
    message = _callback_message(callback)
    if message is None:
        return

    form = await _load_form(state)
    current = Step.partner_drinks if callback_data.partner else Step.drinks
    await _ask(message, state, form, next_step(form, current), app)


async def handle_retry(callback: CallbackQuery, state: FSMContext, app: App) -> None:
    await callback.answer()
    message = _callback_message(callback)
    if message is None:
        return

    form = await _load_form(state)
    if form.guest is None or not form.attendance:
        await state.clear()
        await message.answer(texts.NO_LINK)
        return
    await _submit(message, state, form, app)


async def handle_fallback(message: Message, state: FSMContext) -> None:
    """Reply to messages that do not fit the current step."""

    if await state.get_state() is None:
        await message.answer(texts.NO_LINK)
        return
    await message.answer(texts.ANSWER_ABOVE)


async def handle_stale_callback(callback: CallbackQuery) -> None:
    """Answer buttons from earlier messages that no longer match the conversation step."""

    await callback.answer(texts.STALE_BUTTON)
