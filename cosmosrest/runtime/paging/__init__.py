"""Query paging layer.

Architecture:
    - definitions.py: DocumentQuery and the QueryState machine states
    - executor.py: QueryExecutor (continuation paging, cross-partition fallback)
    - resolver.py: PartitionRangeResolver (full partition key range header)
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import DocumentQuery, QueryState
from .executor import QueryExecutor, is_cross_partition_gateway_error
from .resolver import PartitionRangeResolver

__all__ = [
    "DocumentQuery",
    "QueryState",
    "QueryExecutor",
    "PartitionRangeResolver",
    "is_cross_partition_gateway_error",
]
