"""Guest store: keyed lookup and RSVP status updates.

Values are always passed as query parameters; nothing user-supplied is interpolated into SQL.
"""

from __future__ import annotations

from psycopg import AsyncConnection
from psycopg.rows import dict_row

from src.guests.schema import Guest, RsvpStatus, guest_from_obj

_SELECT_GUEST_SQL = """
    SELECT guest_id,
           name,
           full_name,
           invitation_type,
           partner_name,
           partner_full_name,
           guest_group AS "group",
           custom_message,
           show_accommodation,
           show_alcohol,
           rsvp_status
    FROM guests
    WHERE guest_id = %s
"""

_UPDATE_STATUS_SQL = """
    UPDATE guests
    SET rsvp_status = %s,
        updated_at  = NOW()
    WHERE guest_id = %s
"""


async def fetch_guest(conn: AsyncConnection, guest_id: str) -> Guest | None:
    """Return the guest with `guest_id`, or `None` if there is no such row."""

    async with conn.cursor(row_factory=dict_row) as cur:
        await cur.execute(_SELECT_GUEST_SQL, (guest_id,))
        row = await cur.fetchone()

    if row is None:
        return None
    return guest_from_obj(row)


async def update_rsvp_status(conn: AsyncConnection, guest_id: str, status: RsvpStatus) -> bool:
    """Set the RSVP status of a guest.

    Returns:
        Whether a guest row was updated. An unknown id is not an error.
    """

    async with conn.cursor() as cur:
        await cur.execute(_UPDATE_STATUS_SQL, (status.value, guest_id))
        return cur.rowcount > 0
