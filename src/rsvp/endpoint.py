"""JSON request/response envelopes for guest lookup and RSVP submission.

Contract:
    - Lookup returns `{"success": true, "guest": {...}}` or `{"success": false, "error": "..."}`.
    - Submission returns `{"success": true}` or `{"success": false, "error": "..."}`.
    - Nothing raises out of these functions; failures are logged and reported in the envelope.
"""

from __future__ import annotations

import json
import logging
from time import monotonic
from typing import Any

from psycopg_pool import AsyncConnectionPool
from pydantic import ValidationError

from src.db.pool import get_conn
from src.guests.schema import submission_from_obj
from src.rsvp.service import RsvpError, load_guest, submit_rsvp

logger = logging.getLogger(__name__)

_INTERNAL_ERROR = "Internal error"


def _error(message: str) -> dict[str, Any]:
    return {"success": False, "error": message}


async def get_guest(pool: AsyncConnectionPool, guest_id: str | None) -> dict[str, Any]:
    """Look up a guest for the invitation page."""

    # noinspection PyBroadException
    try:
        async with get_conn(pool) as conn:
            guest = await load_guest(conn, guest_id)
    except RsvpError as exc:
        logger.info("guest lookup failed guest_id=%s reason=%s", guest_id or "-", exc)
        return _error(str(exc))
    except Exception:
        logger.exception("guest lookup crashed guest_id=%s", guest_id or "-")
        return _error(_INTERNAL_ERROR)

    return {"success": True, "guest": guest.model_dump(mode="json")}


async def post_rsvp(
        pool: AsyncConnectionPool,
        payload: dict[str, Any] | str | bytes,
) -> dict[str, Any]:
    """Validate and store an RSVP submission."""

    started = monotonic()

    try:
        obj = json.loads(payload) if isinstance(payload, (str, bytes)) else payload
        submission = submission_from_obj(obj)
    except (ValueError, ValidationError) as exc:
        logger.info("rejected rsvp payload reason=%s", type(exc).__name__)
        return _error(str(exc))

    # noinspection PyBroadException
    try:
        async with get_conn(pool) as conn:
            rows = await submit_rsvp(conn, submission)
    except Exception as exc:
        logger.exception("rsvp submission failed guest_id=%s", submission.guest_id or "-")
        return _error(str(exc))

    latency_ms = int((monotonic() - started) * 1000)
    logger.info(
        "handled rsvp guest_id=%s rows=%d latency_ms=%d",
        submission.guest_id or "-",
        len(rows),
        latency_ms,
    )
    return {"success": True}
