"""Shared state for the Telegram handlers and the invitation page endpoint.

Both surfaces read guests and write answers through the same pool.
"""

from __future__ import annotations

from dataclasses import dataclass

from psycopg_pool import AsyncConnectionPool

from src.config.settings import Settings
from src.db.pool import create_pool


@dataclass(frozen=True)
class App:
    """Settings and the DB pool, passed to handlers as the `app` keyword."""

    settings: Settings
    pool: AsyncConnectionPool


def create_app(settings: Settings) -> App:
    """Build the container. The pool is closed; `await app.pool.open()` before serving."""

    # Guests answer a few times a day; a small pool is plenty.
    pool = create_pool(settings.database_url, max_size=5)
    return App(settings=settings, pool=pool)
