"""Async HTTP transport.

Issues exactly one request and reports what came back. Status codes are not
interpreted here; ``ThrottleGuard`` decides what a 4xx or 5xx means.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

import aiohttp

from ...core.config import ClientOptions
from ...core.enums import HttpVerb
from ...core.exceptions import TransportError
from ...models import ResponseEnvelope


class HTTPClient:
    """Async HTTP client wrapper returning ``ResponseEnvelope`` objects."""

    def __init__(self, base_url: str, options: ClientOptions | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.options = options or ClientOptions()
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.options.timeout)
            )
        return self._session

    def url_for(self, path: str) -> str:
        if path.startswith("http"):
            return path
        return f"{self.base_url}{path}"

    async def request(
        self,
        method: HttpVerb | str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        body: str | bytes | None = None,
        options: ClientOptions | None = None,
    ) -> ResponseEnvelope:
        """Issue one request.

        The response body is decoded as UTF-8; undecodable bytes are replaced
        with U+FFFD so a malformed payload still yields an envelope.

        Args:
            method: HTTP method
            path: Path relative to ``base_url`` (or an absolute URL)
            headers: Request headers; they override ``options.extra_headers``
            body: Optional raw body
            options: Per-call options, defaults to the client options

        Returns:
            ResponseEnvelope for any HTTP status

        Raises:
            TransportError: If no response could be obtained
        """
        opts = options or self.options
        merged_headers = {**opts.extra_headers, **(headers or {})}
        kwargs: dict[str, Any] = {"headers": merged_headers}
        if body is not None:
            kwargs["data"] = body.encode("utf-8") if isinstance(body, str) else body
        if opts.proxy:
            kwargs["proxy"] = opts.proxy
        if opts is not self.options:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=opts.timeout)

        url = self.url_for(path)
        try:
            async with self.session.request(str(method), url, **kwargs) as response:
                raw = await response.read()
                return ResponseEnvelope.build(
                    status=response.status,
                    headers=list(response.headers.items()),
                    body=raw.decode("utf-8", errors="replace"),
                )
        except aiohttp.ClientError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"{method} {url} timed out after {opts.timeout}s") from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
