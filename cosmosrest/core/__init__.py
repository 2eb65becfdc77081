"""Core components."""

from .config import ClientOptions, Credentials
from .enums import HttpVerb, ResourceType
from .exceptions import (
    ClientError,
    ConfigurationError,
    CosmosError,
    QueryCancelled,
    QueryError,
    RequestError,
    ResponseFormatError,
    RetryExhausted,
    ServerError,
    TransportError,
)

__all__ = [
    "ClientOptions",
    "Credentials",
    "HttpVerb",
    "ResourceType",
    "CosmosError",
    "ConfigurationError",
    "RequestError",
    "ClientError",
    "ServerError",
    "TransportError",
    "RetryExhausted",
    "QueryError",
    "QueryCancelled",
    "ResponseFormatError",
]
