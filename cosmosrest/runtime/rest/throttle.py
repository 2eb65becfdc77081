"""Retry-on-throttle wrapper around the HTTP transport.

When the server rate-limits a request it answers with a 4xx carrying
``x-ms-retry-after-ms``. The guard sleeps for that long plus a small buffer
and re-issues the identical request. The headers are reused as-is: the
signature covers verb, resource and date, none of which change, although a
very long wait can outlive the signed date and the retry then fails with an
ordinary ``ClientError``.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Protocol

from ...core.config import ClientOptions
from ...core.constants import HEADER_RETRY_AFTER_MS
from ...core.enums import HttpVerb
from ...core.exceptions import ClientError, RetryExhausted, ServerError
from ...models import ResponseEnvelope

logger = logging.getLogger(__name__)


class Transport(Protocol):
    options: ClientOptions

    async def request(
        self,
        method: HttpVerb | str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        body: str | bytes | None = None,
        options: ClientOptions | None = None,
    ) -> ResponseEnvelope: ...


def retry_after_seconds(envelope: ResponseEnvelope) -> float | None:
    """Server-requested delay in seconds, or None if the response is not a throttle."""
    if not envelope.is_client_error:
        return None
    raw = envelope.header(HEADER_RETRY_AFTER_MS)
    if raw is None:
        return None
    try:
        delay_ms = float(raw.split(",")[0].strip())
    except ValueError:
        return None
    return max(delay_ms, 0.0) / 1000.0


class ThrottleGuard:
    """Executes requests, absorbing server throttling.

    The retry loop is bounded by ``ClientOptions.max_throttle_retries`` and
    ``ClientOptions.max_throttle_wait``; past either bound ``RetryExhausted``
    is raised.
    """

    def __init__(
        self,
        transport: Transport,
        *,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._transport = transport
        self._sleep = sleep

    @property
    def transport(self) -> Transport:
        return self._transport

    async def execute(
        self,
        path: str,
        method: HttpVerb | str,
        headers: Mapping[str, str],
        body: str | bytes | None = None,
        *,
        options: ClientOptions | None = None,
    ) -> ResponseEnvelope:
        """Issue a request, retrying while the server throttles it.

        Returns:
            Successful ResponseEnvelope (status < 400)

        Raises:
            ClientError: Non-throttled 4xx
            ServerError: 5xx
            RetryExhausted: Throttled beyond the configured budget
            TransportError: Connection failure (from the transport)
        """
        opts = options or self._transport.options
        attempts = 0
        waited = 0.0

        while True:
            envelope = await self._transport.request(
                method, path, headers=headers, body=body, options=opts
            )
            attempts += 1

            if envelope.ok:
                return envelope

            delay = retry_after_seconds(envelope)
            if delay is None:
                if envelope.is_server_error:
                    raise ServerError.from_envelope(envelope)
                raise ClientError.from_envelope(envelope)

            pause = delay + opts.throttle_buffer
            retries = attempts - 1
            if retries >= opts.max_throttle_retries or waited + pause > opts.max_throttle_wait:
                logger.warning(
                    "throttle_exhausted",
                    extra={
                        "path": path,
                        "method": str(method),
                        "attempts": attempts,
                        "waited_s": waited,
                    },
                )
                raise RetryExhausted(
                    f"{method} {path} still throttled after {attempts} attempts "
                    f"({waited:.3f}s waited)",
                    attempts=attempts,
                    waited=waited,
                    last_response=envelope,
                )

            logger.info(
                "throttle_retry",
                extra={
                    "path": path,
                    "method": str(method),
                    "status": envelope.status,
                    "delay_s": pause,
                    "attempt": attempts,
                },
            )
            await self._sleep(pause)
            waited += pause
