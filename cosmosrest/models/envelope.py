"""Request and response value types."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ..core.enums import HttpVerb, ResourceType
from .errors import ErrorBody


@dataclass(frozen=True)
class RequestSpec:
    """Everything needed to sign and issue one request.

    Attributes:
        verb: Verb that is signed, and sent unless ``method`` is set
        resource_type: Resource type tag that is signed
        resource_id: Resource id that is signed
        path: Request path relative to the account host
        body: Optional request body (JSON or query text)
        headers: Extra headers merged under the auth headers
        method: HTTP method actually sent when it differs from ``verb``
    """

    verb: HttpVerb
    resource_type: ResourceType
    resource_id: str
    path: str
    body: str | bytes | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    method: HttpVerb | None = None

    @property
    def http_method(self) -> HttpVerb:
        return self.method or self.verb


def _normalise_headers(
    raw: Mapping[str, str] | Iterable[tuple[str, str]],
) -> dict[str, tuple[str, ...]]:
    items = raw.items() if isinstance(raw, Mapping) else raw
    grouped: dict[str, list[str]] = {}
    for name, value in items:
        grouped.setdefault(name.lower(), []).append(value)
    return {name: tuple(values) for name, values in grouped.items()}


@dataclass(frozen=True)
class ResponseEnvelope:
    """Status, headers and raw body of one HTTP response.

    Header names are lower-cased; every name maps to the tuple of values the
    server sent for it, in order.
    """

    status: int
    headers: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    body: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @classmethod
    def build(
        cls,
        status: int,
        headers: Mapping[str, str] | Iterable[tuple[str, str]] = (),
        body: str = "",
    ) -> ResponseEnvelope:
        """Create an envelope from raw ``(name, value)`` header pairs."""
        return cls(status=status, headers=_normalise_headers(headers), body=body)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 400

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status < 500

    @property
    def is_server_error(self) -> bool:
        return self.status >= 500

    def header_values(self, name: str) -> tuple[str, ...]:
        """All values sent for ``name`` (case-insensitive)."""
        return self.headers.get(name.lower(), ())

    def header(self, name: str) -> str | None:
        """Values for ``name`` joined with ``", "``, or None if absent."""
        values = self.header_values(name)
        if not values:
            return None
        return ", ".join(values)

    def json(self) -> Any:
        return json.loads(self.body)

    def error_body(self) -> ErrorBody | None:
        return ErrorBody.parse(self.body)
