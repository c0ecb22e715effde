"""RSVP submission: response rows, guest status updates, JSON envelopes and their HTTP routes."""
