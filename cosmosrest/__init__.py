"""cosmosrest - async client for the Cosmos DB SQL REST API."""

from .api import CosmosClient
from .auth import MasterKeySigner
from .core import (
    ClientError,
    ClientOptions,
    ConfigurationError,
    CosmosError,
    Credentials,
    HttpVerb,
    QueryCancelled,
    QueryError,
    RequestError,
    ResourceType,
    ResponseFormatError,
    RetryExhausted,
    ServerError,
    TransportError,
)
from .models import (
    ErrorBody,
    PageCollection,
    PartitionKeyRange,
    PartitionKeyRangeSet,
    RequestSpec,
    ResponseEnvelope,
)
from .runtime import (
    DocumentQuery,
    HTTPClient,
    PartitionRangeResolver,
    QueryExecutor,
    QueryState,
    RestRunner,
    ThrottleGuard,
)

__version__ = "0.1.0"

__all__ = [
    "CosmosClient",
    "MasterKeySigner",
    "Credentials",
    "ClientOptions",
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
    "ErrorBody",
    "PageCollection",
    "PartitionKeyRange",
    "PartitionKeyRangeSet",
    "RequestSpec",
    "ResponseEnvelope",
    "DocumentQuery",
    "HTTPClient",
    "PartitionRangeResolver",
    "QueryExecutor",
    "QueryState",
    "RestRunner",
    "ThrottleGuard",
]
