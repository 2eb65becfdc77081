"""REST runtime abstractions."""

from .http_client import HTTPClient
from .runner import ResourceEndpoint, RestRunner
from .throttle import ThrottleGuard, retry_after_seconds

__all__ = [
    "HTTPClient",
    "ThrottleGuard",
    "RestRunner",
    "ResourceEndpoint",
    "retry_after_seconds",
]
