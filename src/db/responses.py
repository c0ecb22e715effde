"""Response store: one row per attendee, upserted by guest id."""

from __future__ import annotations

from psycopg import AsyncConnection, sql
from psycopg.rows import dict_row

from src.guests.schema import DRINK_KEYS, Drinks, ResponseRow

RESPONSE_COLUMNS: tuple[str, ...] = (
    "submitted_at",
    "guest_id",
    "name",
    "attendance",
    "dietary",
    "accommodation",
    *DRINK_KEYS,
)

# Rows with an empty guest id never match the partial unique index, so they are always inserted.
_UPSERT_SQL = sql.SQL(
    """
    INSERT INTO responses ({columns})
    VALUES ({placeholders})
    ON CONFLICT (guest_id) WHERE guest_id <> '' DO UPDATE SET {updates}
    """
).format(
    columns=sql.SQL(", ").join(sql.Identifier(c) for c in RESPONSE_COLUMNS),
    placeholders=sql.SQL(", ").join(sql.Placeholder() for _ in RESPONSE_COLUMNS),
    updates=sql.SQL(", ").join(
        sql.SQL("{col} = EXCLUDED.{col}").format(col=sql.Identifier(c))
        for c in RESPONSE_COLUMNS
        if c != "guest_id"
    ),
)

_SELECT_BY_GUEST_SQL = sql.SQL(
    "SELECT {columns} FROM responses WHERE guest_id = %s ORDER BY id"
).format(columns=sql.SQL(", ").join(sql.Identifier(c) for c in RESPONSE_COLUMNS))


async def upsert_response(conn: AsyncConnection, row: ResponseRow) -> None:
    """Insert the row, or overwrite the previous answer stored under the same guest id."""

    async with conn.cursor() as cur:
        await cur.execute(_UPSERT_SQL, row.values())


async def fetch_responses(conn: AsyncConnection, guest_id: str) -> list[ResponseRow]:
    """Return stored rows for `guest_id` (an empty id returns every anonymous answer)."""

    async with conn.cursor(row_factory=dict_row) as cur:
        await cur.execute(_SELECT_BY_GUEST_SQL, (guest_id,))
        records = await cur.fetchall()

    return [
        ResponseRow(
            timestamp=r["submitted_at"],
            guest_id=r["guest_id"],
            name=r["name"],
            attendance=r["attendance"],
            dietary=r["dietary"],
            accommodation=r["accommodation"],
            drinks=Drinks(**{key: r[key] for key in DRINK_KEYS}),
        )
        for r in records
    ]
