"""Guest-sheet-to-row conversion helpers.

The guest list is maintained as a spreadsheet and exported to CSV. Both the loader CLI and the
integration tests turn those records into row tuples for the `guests` table through this module.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from src.guests.schema import Guest, guest_from_obj

GUEST_COLUMNS: tuple[str, ...] = (
    "guest_id",
    "name",
    "full_name",
    "invitation_type",
    "partner_name",
    "partner_full_name",
    "guest_group",
    "custom_message",
    "show_accommodation",
    "show_alcohol",
    "rsvp_status",
)

_FALSE_CELLS = frozenset({"false", "0", "no", "нет"})
_TRUE_CELLS = frozenset({"true", "1", "yes", "да"})


def parse_sheet_bool(value: Any) -> bool | None:
    """Parse a spreadsheet checkbox/text cell.

    Returns:
        `True`/`False` for recognized values, `None` for a blank cell (the caller applies the
        default).

    Raises:
        ValueError: If the cell holds anything else.
    """

    if value is None or isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if not text:
        return None
    if text in _FALSE_CELLS:
        return False
    if text in _TRUE_CELLS:
        return True
    raise ValueError(f"not a boolean cell: {value!r}")


def guest_from_sheet_record(record: Mapping[str, Any]) -> Guest:
    """Validate one CSV record (header -> cell) as a `Guest`."""

    data = dict(record)
    for flag in ("show_accommodation", "show_alcohol"):
        if flag in data:
            data[flag] = parse_sheet_bool(data[flag])
    return guest_from_obj(data)


def iter_guest_rows(guests: Sequence[Guest]) -> Iterable[tuple[Any, ...]]:
    """Yield row tuples for inserting into the `guests` table."""

    for guest in guests:
        yield (
            guest.guest_id,
            guest.name,
            guest.full_name,
            guest.invitation_type,
            guest.partner_name,
            guest.partner_full_name,
            guest.group,
            guest.custom_message,
            guest.show_accommodation,
            guest.show_alcohol,
            guest.rsvp_status.value,
        )
