"""Runtime orchestration components."""

from .paging import DocumentQuery, PartitionRangeResolver, QueryExecutor, QueryState
from .rest import HTTPClient, ResourceEndpoint, RestRunner, ThrottleGuard

__all__ = [
    "HTTPClient",
    "ThrottleGuard",
    "RestRunner",
    "ResourceEndpoint",
    "QueryExecutor",
    "PartitionRangeResolver",
    "DocumentQuery",
    "QueryState",
]
