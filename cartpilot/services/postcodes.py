from __future__ import annotations

import logging
import re
from typing import Any, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from cartpilot.core.errors import InvalidPostcode, LookupFailed
from cartpilot.schemas.stores import PostcodeLocation

logger = logging.getLogger(__name__)

POSTCODE_RE = re.compile(r"^[A-Z]{1,2}\d[A-Z\d]?\s?\d[A-Z]{2}$", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s")


def validate_format(postcode: str) -> bool:
    return bool(POSTCODE_RE.match(postcode.strip()))


def normalize(postcode: str) -> str:
    """Normalize a postcode for display and lookup: 'm11aa' -> 'M1 1AA'."""
    cleaned = _WHITESPACE_RE.sub("", postcode).upper()
    if len(cleaned) >= 5:
        return f"{cleaned[:-3]} {cleaned[-3:]}"
    return cleaned


class PostcodeService:
    """Resolves UK postcodes to coordinates through postcodes.io."""

    def __init__(self, client: httpx.AsyncClient, base_url: str = "https://api.postcodes.io") -> None:
        self.client = client
        self.base_url = base_url.rstrip("/")

    validate_format = staticmethod(validate_format)
    normalize = staticmethod(normalize)

    async def lookup(self, postcode: str) -> PostcodeLocation:
        """Return the location of ``postcode``.

        Raises InvalidPostcode before touching the network when the format is wrong, and
        LookupFailed for transport errors, timeouts, error statuses, unknown postcodes and
        payloads missing coordinates.
        """
        if not validate_format(postcode):
            raise InvalidPostcode(postcode)

        normalized = normalize(postcode)
        url = f"{self.base_url}/postcodes/{quote(normalized)}"
        logger.debug("Looking up postcode %s", normalized)

        try:
            response = await self.client.get(url)
        except httpx.TimeoutException as exc:
            raise LookupFailed(normalized, "timed out") from exc
        except httpx.HTTPError as exc:
            raise LookupFailed(normalized, f"request error: {exc}") from exc

        if response.status_code == 404:
            raise LookupFailed(normalized, "postcode not found")
        if response.is_error:
            raise LookupFailed(normalized, f"service answered {response.status_code}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise LookupFailed(normalized, "malformed response body") from exc

        return self._parse_location(normalized, payload)

    async def resolve(self, postcode: str) -> Optional[PostcodeLocation]:
        """Like ``lookup`` but returns None instead of raising."""
        try:
            return await self.lookup(postcode)
        except InvalidPostcode:
            logger.warning("Invalid postcode format: %r", postcode)
        except LookupFailed as exc:
            logger.warning("%s", exc)
        return None

    @staticmethod
    def _parse_location(postcode: str, payload: Any) -> PostcodeLocation:
        if not isinstance(payload, dict) or payload.get("status") != 200 or not payload.get("result"):
            raise LookupFailed(postcode, "postcode not found")

        result = payload["result"]
        if not isinstance(result, dict):
            raise LookupFailed(postcode, "malformed response body")
        try:
            return PostcodeLocation(
                postcode=result.get("postcode") or postcode,
                latitude=result.get("latitude"),
                longitude=result.get("longitude"),
                district=result.get("admin_district"),
                ward=result.get("admin_ward"),
                country=result.get("country"),
            )
        except ValidationError as exc:
            raise LookupFailed(postcode, "response is missing coordinates") from exc


__all__ = ["POSTCODE_RE", "validate_format", "normalize", "PostcodeService"]
