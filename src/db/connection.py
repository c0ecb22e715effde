"""Plain (non-pooled) connections for `src.db.migrate` and `src.db.load_guests`."""

from __future__ import annotations

import os

import psycopg


def require_database_url() -> str:
    """Return `DATABASE_URL` or fail with a message pointing at `.env`."""

    database_url = os.getenv("DATABASE_URL")
    if not database_url:
        raise RuntimeError("DATABASE_URL is required (set it in .env or environment)")
    return database_url


def connect_utc(database_url: str) -> psycopg.Connection:
    """Connect for a CLI run, in UTC like the pooled bot sessions."""

    conn = psycopg.connect(database_url)
    conn.execute("SET TIME ZONE 'UTC'", prepare=False)
    return conn
