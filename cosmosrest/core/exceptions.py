"""Custom exception hierarchy."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models import ErrorBody, ResponseEnvelope


class CosmosError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(CosmosError):
    """Credentials or options are unusable (e.g. a key that is not base64)."""

    pass


class RequestError(CosmosError):
    """Server rejected a request.

    Carries the status code, raw body and, when the body was a JSON error
    document, the parsed ``ErrorBody``.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str = "",
        error: ErrorBody | None = None,
        headers: Mapping[str, tuple[str, ...]] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.error = error
        self.headers = dict(headers or {})

    @property
    def code(self) -> str | None:
        """Server error code (e.g. ``BadRequest``), if the body had one."""
        return self.error.code if self.error else None

    @classmethod
    def from_envelope(cls, envelope: ResponseEnvelope, message: str | None = None) -> RequestError:
        """Build an error from a failed response."""
        error = envelope.error_body()
        if message is None:
            detail = error.message if error and error.message else envelope.body[:200]
            message = f"HTTP {envelope.status}: {detail}" if detail else f"HTTP {envelope.status}"
        return cls(
            message,
            status_code=envelope.status,
            body=envelope.body,
            error=error,
            headers=envelope.headers,
        )


class ClientError(RequestError):
    """Non-throttled 4xx response (bad auth, bad partition key, not found, ...)."""

    pass


class ServerError(RequestError):
    """5xx response."""

    pass


class TransportError(CosmosError):
    """Connection, DNS, TLS or timeout failure before a response arrived."""

    pass


class RetryExhausted(CosmosError):
    """Server kept throttling past the configured retry budget."""

    def __init__(
        self,
        message: str,
        attempts: int,
        waited: float,
        last_response: ResponseEnvelope | None = None,
    ) -> None:
        super().__init__(message)
        self.attempts = attempts
        self.waited = waited
        self.last_response = last_response


class QueryError(CosmosError):
    """A query could not be completed.

    ``partial_pages`` holds the page bodies fetched before the failure, in
    retrieval order. They are informational only: the query as a whole
    failed.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error: ErrorBody | None = None,
        partial_pages: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.partial_pages = list(partial_pages or [])


class QueryCancelled(QueryError):
    """The caller signalled cancellation between pages."""

    pass


class ResponseFormatError(CosmosError):
    """Response body did not have the expected shape."""

    pass
