"""Guest records, RSVP payloads, and the text shown to a guest.

Everything in this package is pure: storage lives in `src.db`, the conversation in `src.bot`.
"""
