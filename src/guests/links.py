"""Personal invitation links.

Each guest gets a Telegram deep link whose `start` payload is their guest id. Telegram only accepts
`[A-Za-z0-9_-]` in the payload, at most 64 characters.
"""

from __future__ import annotations

import re

_PAYLOAD_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def is_valid_guest_id(guest_id: str) -> bool:
    """Whether `guest_id` can be carried in a deep link as-is."""

    return bool(_PAYLOAD_RE.fullmatch(guest_id or ""))


def build_invite_link(bot_username: str, guest_id: str) -> str:
    """Return `https://t.me/<bot>?start=<guest_id>`.

    Raises:
        ValueError: If the guest id cannot be used as a deep-link payload or the bot username is
            empty.
    """

    username = (bot_username or "").strip().lstrip("@")
    if not username:
        raise ValueError("bot username is required to build invite links")
    if not is_valid_guest_id(guest_id):
        raise ValueError(f"guest id is not a valid deep-link payload: {guest_id!r}")
    return f"https://t.me/{username}?start={guest_id}"
