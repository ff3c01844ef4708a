"""Error types raised by the CartPilot services.

Every error here is recoverable: the HTTP layer maps them to 4xx responses and the
basket storage swallows ``PersistenceCorrupt`` after logging it. An empty search or
nearby-store result is not an error and is returned as an empty list.
"""
from __future__ import annotations


class CartPilotError(Exception):
    """Base class for CartPilot errors."""


class InvalidPostcode(CartPilotError, ValueError):
    """The postcode does not look like a UK postcode. Raised before any network call."""

    def __init__(self, postcode: str) -> None:
        super().__init__(f"Invalid UK postcode format: {postcode!r}")
        self.postcode = postcode


class LookupFailed(CartPilotError):
    """The geocoding service was unreachable, answered badly, or does not know the postcode."""

    def __init__(self, postcode: str, reason: str) -> None:
        super().__init__(f"Postcode lookup failed for {postcode!r}: {reason}")
        self.postcode = postcode
        self.reason = reason


class PersistenceCorrupt(CartPilotError):
    """Stored basket data could not be deserialized."""


__all__ = ["CartPilotError", "InvalidPostcode", "LookupFailed", "PersistenceCorrupt"]
