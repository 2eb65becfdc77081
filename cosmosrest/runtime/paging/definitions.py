"""Query definitions and execution states."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum

from ...core.constants import (
    CONTENT_TYPE_QUERY,
    HEADER_ENABLE_CROSS_PARTITION,
    HEADER_IS_QUERY,
    HEADER_MAX_ITEM_COUNT,
    HEADER_PARTITION_KEY,
    MAX_ITEM_COUNT_SERVER_DEFAULT,
)


class QueryState(str, Enum):
    """States of the query state machine."""

    INIT = "init"
    FIRST_PAGE = "first_page"
    PAGING = "paging"
    CROSS_PARTITION_FALLBACK = "cross_partition_fallback"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class DocumentQuery:
    """A query against one collection.

    Attributes:
        database_id: Database id used in the request path
        collection_id: Collection id used in the path and signature
        query: Query body, sent verbatim on every page request
        cross_partition: Allow the query to fan out across partitions
        partition_value: Restrict the query to a single partition key value
    """

    database_id: str
    collection_id: str
    query: str
    cross_partition: bool = False
    partition_value: str | None = None

    @property
    def path(self) -> str:
        return f"/dbs/{self.database_id}/colls/{self.collection_id}/docs"

    def base_headers(self) -> dict[str, str]:
        """Query headers sent with every page, before auth is added."""
        headers = {
            "Content-Type": CONTENT_TYPE_QUERY,
            HEADER_MAX_ITEM_COUNT: MAX_ITEM_COUNT_SERVER_DEFAULT,
            HEADER_IS_QUERY: "True",
        }
        if self.cross_partition:
            headers[HEADER_ENABLE_CROSS_PARTITION] = "True"
        if self.partition_value:
            headers[HEADER_PARTITION_KEY] = json.dumps([self.partition_value])
        return headers
