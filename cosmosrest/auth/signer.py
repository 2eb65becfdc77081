"""Master-key request signing.

Every request carries an ``authorization`` header holding an HMAC-SHA256
signature over the verb, resource type, resource id and request date. The
date is sent alongside as ``x-ms-date`` and must match the signed value
exactly, so headers are produced fresh for every call and never cached.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from email.utils import format_datetime
from urllib.parse import quote_plus

from ..core.constants import (
    API_VERSION,
    AUTH_TOKEN_VERSION,
    AUTH_TYPE,
    CONTENT_TYPE_JSON,
    DATE_SKEW_SECONDS,
    HEADER_AUTHORIZATION,
    HEADER_DATE,
    HEADER_VERSION,
    USER_AGENT,
)
from ..core.enums import HttpVerb, ResourceType
from ..core.exceptions import ConfigurationError


def _utcnow() -> datetime:
    return datetime.now(UTC)


def format_http_date(moment: datetime) -> str:
    """Format ``moment`` as an RFC 1123 date in GMT."""
    return format_datetime(moment.astimezone(UTC), usegmt=True)


def string_to_sign(
    verb: HttpVerb | str,
    resource_type: ResourceType | str,
    resource_id: str,
    date: str,
) -> str:
    """Canonical, lower-cased payload signed for one request.

    The trailing empty line stands for the unused secondary date field.
    """
    payload = f"{verb}\n{resource_type}\n{resource_id}\n{date}\n\n"
    return payload.lower()


class MasterKeySigner:
    """Produces auth headers from a base64 master key."""

    def __init__(
        self,
        private_key: str,
        *,
        clock: Callable[[], datetime] = _utcnow,
        skew: timedelta = timedelta(seconds=DATE_SKEW_SECONDS),
    ) -> None:
        try:
            self._key = base64.b64decode(private_key, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ConfigurationError("private key is not valid base64") from e
        if not self._key:
            raise ConfigurationError("private key decodes to an empty secret")
        self._clock = clock
        self._skew = skew

    def request_date(self) -> str:
        return format_http_date(self._clock() + self._skew)

    def signature(
        self,
        verb: HttpVerb | str,
        resource_type: ResourceType | str,
        resource_id: str,
        date: str,
    ) -> str:
        payload = string_to_sign(verb, resource_type, resource_id, date)
        digest = hmac.new(self._key, payload.encode("utf-8"), hashlib.sha256).digest()
        return base64.b64encode(digest).decode("ascii")

    def sign(
        self,
        verb: HttpVerb | str,
        resource_type: ResourceType | str,
        resource_id: str,
    ) -> dict[str, str]:
        """Build the auth headers for one request.

        Args:
            verb: HTTP verb being signed
            resource_type: Resource type tag (``docs``, ``colls``, ...)
            resource_id: Id of the resource, or of its parent for feeds

        Returns:
            Fresh header mapping including ``x-ms-date`` and ``authorization``
        """
        date = self.request_date()
        sig = self.signature(verb, resource_type, resource_id, date)
        token = f"type={AUTH_TYPE}&ver={AUTH_TOKEN_VERSION}&sig={sig}"
        return {
            "Accept": CONTENT_TYPE_JSON,
            "User-Agent": USER_AGENT,
            "Cache-Control": "no-cache",
            HEADER_DATE: date,
            HEADER_VERSION: API_VERSION,
            HEADER_AUTHORIZATION: quote_plus(token),
        }
