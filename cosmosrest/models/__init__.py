"""Data models."""

from .envelope import RequestSpec, ResponseEnvelope
from .errors import ErrorBody
from .pages import PageCollection
from .partition import PartitionKeyRange, PartitionKeyRangeSet

__all__ = [
    "ErrorBody",
    "PageCollection",
    "PartitionKeyRange",
    "PartitionKeyRangeSet",
    "RequestSpec",
    "ResponseEnvelope",
]
