"""RSVP use cases on top of the guest and response stores."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from psycopg import AsyncConnection

from src.db.guests import fetch_guest, update_rsvp_status
from src.db.responses import upsert_response
from src.guests.schema import (
    NO_DIETARY,
    PARTNER_ATTENDANCE,
    Guest,
    ResponseRow,
    RsvpStatus,
    RsvpSubmission,
)

logger = logging.getLogger(__name__)

PARTNER_ID_SUFFIX = "_partner"


class RsvpError(ValueError):
    """Base class for RSVP errors that are safe to report back to the guest."""


class MissingGuestIdError(RsvpError):
    """Raised when a lookup is attempted without a guest id."""

    def __init__(self) -> None:
        super().__init__("No guest ID provided")


class GuestNotFoundError(RsvpError):
    """Raised when no guest has the requested id."""

    def __init__(self, guest_id: str) -> None:
        super().__init__("Guest not found")
        self.guest_id = guest_id


def build_response_rows(submission: RsvpSubmission, timestamp: datetime) -> list[ResponseRow]:
    """Turn a submission into stored rows.

    The primary guest always gets a row. The partner gets a second row, keyed by
    `<guest_id>_partner`, only when they are named and the guest answered "Приду с партнёром".
    Both rows share the timestamp and the accommodation answer.
    """

    guest_id = submission.guest_id or ""
    rows = [
        ResponseRow(
            timestamp=timestamp,
            guest_id=guest_id,
            name=submission.name,
            attendance=submission.attendance.value,
            dietary=submission.dietary,
            accommodation=submission.accommodation,
            drinks=submission.drinks,
        )
    ]

    if submission.brings_partner:
        rows.append(
            ResponseRow(
                timestamp=timestamp,
                guest_id=guest_id + PARTNER_ID_SUFFIX if guest_id else "",
                name=submission.partner_name,
                attendance=PARTNER_ATTENDANCE,
                dietary=submission.partner_dietary or NO_DIETARY,
                accommodation=submission.accommodation,
                drinks=submission.partner_drinks,
            )
        )

    return rows


async def load_guest(conn: AsyncConnection, guest_id: str | None) -> Guest:
    """Look up a guest by id.

    Raises:
        MissingGuestIdError: If `guest_id` is empty.
        GuestNotFoundError: If there is no such guest.
    """

    guest_id = (guest_id or "").strip()
    if not guest_id:
        raise MissingGuestIdError()

    guest = await fetch_guest(conn, guest_id)
    if guest is None:
        raise GuestNotFoundError(guest_id)
    return guest


async def submit_rsvp(
        conn: AsyncConnection,
        submission: RsvpSubmission,
        *,
        now: datetime | None = None,
) -> list[ResponseRow]:
    """Store an RSVP answer and mark the guest as responded.

    All writes happen in one transaction. Resubmitting overwrites the previous answer of the same
    guest (and partner) instead of adding rows.
    """

    timestamp = now or datetime.now(UTC)
    rows = build_response_rows(submission, timestamp)

    async with conn.transaction():
        for row in rows:
            await upsert_response(conn, row)
        if submission.guest_id:
            updated = await update_rsvp_status(conn, submission.guest_id, RsvpStatus.responded)
            if not updated:
                logger.warning("rsvp for unknown guest guest_id=%s", submission.guest_id)

    logger.info(
        "rsvp stored guest_id=%s attendance=%s rows=%d",
        submission.guest_id or "-",
        submission.attendance.value,
        len(rows),
    )
    return rows
