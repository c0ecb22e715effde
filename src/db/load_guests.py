"""Load the guest list into Postgres.

The guest list is kept in a spreadsheet. Export it as CSV with a header row naming the columns:

    guest_id,name,full_name,invitation_type,partner_name,partner_full_name,group,custom_message,
    show_accommodation,show_alcohol,rsvp_status

Only `guest_id` is mandatory; blank cells take the defaults of `src.guests.schema.Guest`. Rows with
an empty `guest_id` (trailing spreadsheet rows) are skipped.
"""

from __future__ import annotations

import argparse
import csv
import logging
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from src.config.logging import configure_logging
from src.db.connection import connect_utc, require_database_url
from src.db.rows import GUEST_COLUMNS, guest_from_sheet_record, iter_guest_rows
from src.guests.links import build_invite_link
from src.guests.schema import Guest

logger = logging.getLogger(__name__)

_UPSERT_GUEST_SQL = f"""
    INSERT INTO guests ({", ".join(GUEST_COLUMNS)})
    VALUES ({", ".join(["%s"] * len(GUEST_COLUMNS))}) ON CONFLICT (guest_id) DO
    UPDATE SET
        name = EXCLUDED.name,
        full_name = EXCLUDED.full_name,
        invitation_type = EXCLUDED.invitation_type,
        partner_name = EXCLUDED.partner_name,
        partner_full_name = EXCLUDED.partner_full_name,
        guest_group = EXCLUDED.guest_group,
        custom_message = EXCLUDED.custom_message,
        show_accommodation = EXCLUDED.show_accommodation,
        show_alcohol = EXCLUDED.show_alcohol,
        updated_at = NOW()
"""


def read_guest_csv(path: Path) -> list[Guest]:
    """Parse a CSV export of the guest sheet.

    Raises:
        ValueError: If the header has no `guest_id` column, a row is invalid, or an id repeats.
    """

    guests: list[Guest] = []
    seen: set[str] = set()

    # utf-8-sig: spreadsheet exports often start with a BOM.
    with path.open(encoding="utf-8-sig", newline="") as fh:
        reader = csv.DictReader(fh)
        if not reader.fieldnames or "guest_id" not in reader.fieldnames:
            raise ValueError("Unexpected guest list format: header must contain 'guest_id'")

        for line_no, record in enumerate(reader, start=2):
            guest_id = (record.get("guest_id") or "").strip()
            if not guest_id:
                continue
            try:
                guest = guest_from_sheet_record(record)
            except (ValidationError, ValueError) as exc:
                raise ValueError(f"Invalid guest row at line {line_no}: {exc}") from exc
            if guest.guest_id in seen:
                raise ValueError(f"Duplicate guest_id at line {line_no}: {guest.guest_id}")
            seen.add(guest.guest_id)
            guests.append(guest)

    return guests


def load_guests(*, path: str, truncate: bool) -> list[Guest]:
    """Upsert the guest list into the `guests` table.

    RSVP statuses of existing guests are left untouched so re-importing an edited sheet does not
    reset answers.
    """

    load_dotenv(".env")
    database_url = require_database_url()

    guests = read_guest_csv(Path(path))

    with connect_utc(database_url) as conn:
        with conn.transaction():
            with conn.cursor() as cur:
                if truncate:
                    cur.execute("TRUNCATE guests", prepare=False)
                cur.executemany(_UPSERT_GUEST_SQL, list(iter_guest_rows(guests)))

    logger.info("loaded guests count=%d truncate=%s", len(guests), truncate)
    return guests


def main() -> None:
    """CLI entry point for importing the guest list."""

    parser = argparse.ArgumentParser(description="Load the wedding guest list into Postgres.")
    parser.add_argument("--path", required=True, help="Path to the guest list CSV export.")
    parser.add_argument(
        "--truncate",
        action="store_true",
        help="TRUNCATE the guests table before loading (destructive).",
    )
    parser.add_argument(
        "--links",
        metavar="BOT_USERNAME",
        help="Print a personal invitation link for every loaded guest.",
    )
    args = parser.parse_args()

    configure_logging()
    guests = load_guests(path=args.path, truncate=args.truncate)

    if args.links:
        for guest in guests:
            try:
                link = build_invite_link(args.links, guest.guest_id)
            except ValueError as exc:
                logger.warning("no invite link guest_id=%s reason=%s", guest.guest_id, exc)
                continue
            print(f"{guest.guest_id}\t{guest.full_name or guest.name}\t{link}")


if __name__ == "__main__":
    main()
