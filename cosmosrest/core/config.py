"""Client configuration.

Architecture:
    Both structures are frozen dataclasses. ``Credentials`` never change for
    the lifetime of a client. ``ClientOptions`` is the default request
    configuration; per-call overrides produce a new instance through
    ``merged`` so no caller can alter another caller's settings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, Mapping

from .exceptions import ConfigurationError

ENV_HOST = "COSMOS_HOST"
ENV_KEY = "COSMOS_KEY"


@dataclass(frozen=True)
class Credentials:
    """Account endpoint and master key.

    Attributes:
        host: Base URL of the account, e.g. ``https://acct.documents.azure.com``
        private_key: Primary or secondary master key, base64 encoded
    """

    host: str
    private_key: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.host:
            raise ConfigurationError("host must not be empty")
        if not self.private_key:
            raise ConfigurationError("private_key must not be empty")
        # Paths always start with "/", so drop any trailing slash once here
        object.__setattr__(self, "host", self.host.rstrip("/"))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Credentials:
        """Read credentials from ``COSMOS_HOST`` and ``COSMOS_KEY``."""
        env = os.environ if environ is None else environ
        host = env.get(ENV_HOST)
        key = env.get(ENV_KEY)
        if not host or not key:
            raise ConfigurationError(f"{ENV_HOST} and {ENV_KEY} must both be set")
        return cls(host=host, private_key=key)


@dataclass(frozen=True)
class ClientOptions:
    """Default request configuration.

    Attributes:
        timeout: Total seconds allowed per HTTP request
        proxy: Optional proxy URL passed to aiohttp
        extra_headers: Headers added to every request (request headers win)
        max_throttle_retries: Retries allowed per request while throttled
        max_throttle_wait: Cumulative seconds of throttle sleep per request
        throttle_buffer: Seconds added to every server-requested delay
    """

    timeout: float = 30.0
    proxy: str | None = None
    extra_headers: Mapping[str, str] = field(default_factory=dict)
    max_throttle_retries: int = 9
    max_throttle_wait: float = 30.0
    throttle_buffer: float = 0.05

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")
        if self.max_throttle_retries < 0:
            raise ConfigurationError("max_throttle_retries cannot be negative")
        if self.max_throttle_wait < 0:
            raise ConfigurationError("max_throttle_wait cannot be negative")
        object.__setattr__(self, "extra_headers", MappingProxyType(dict(self.extra_headers)))

    def merged(self, overrides: Mapping[str, Any] | None = None, **kwargs: Any) -> ClientOptions:
        """Return a copy with ``overrides`` applied.

        ``extra_headers`` overrides are merged into the existing headers
        rather than replacing them; ``extra_headers=None`` leaves them as-is.

        Raises:
            ConfigurationError: If an override names an unknown option
        """
        changes = {**(overrides or {}), **kwargs}
        if not changes:
            return self
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise ConfigurationError(f"Unknown client options: {sorted(unknown)}")
        if "extra_headers" in changes:
            extra = changes["extra_headers"]
            if extra is None:
                del changes["extra_headers"]
            else:
                changes["extra_headers"] = {**self.extra_headers, **extra}
        if not changes:
            return self
        return replace(self, **changes)
