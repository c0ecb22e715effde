"""Session setup run on every connection the async pool hands out."""

from __future__ import annotations

from psycopg import AsyncConnection


async def ensure_utc(conn: AsyncConnection) -> None:
    """Switch the session to UTC so `submitted_at` is written and read back unchanged."""

    async with conn.cursor() as cur:
        await cur.execute("SET TIME ZONE 'UTC'", prepare=False)
    # The pool rejects connections left inside a transaction.
    await conn.commit()
