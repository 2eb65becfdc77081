"""Partition key range resolution for cross-partition queries.

Some cross-partition queries cannot be served by the gateway directly. The
workaround is to list every partition key range of the collection and pass
them all in ``x-ms-documentdb-partitionkeyrangeid``. Ranges are fetched on
demand and never cached: a split between two queries would otherwise leave
a stale range list behind.
"""

from __future__ import annotations

from pydantic import ValidationError

from ...core.config import ClientOptions
from ...core.constants import CONTENT_TYPE_JSON, HEADER_MAX_ITEM_COUNT, MAX_ITEM_COUNT_SERVER_DEFAULT
from ...core.enums import HttpVerb, ResourceType
from ...core.exceptions import ResponseFormatError
from ...models import PartitionKeyRangeSet, RequestSpec
from ..rest.runner import RestRunner


class PartitionRangeResolver:
    """Fetches partition key ranges and renders the full-range header."""

    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def fetch_ranges(
        self,
        database_id: str,
        collection_id: str,
        *,
        options: ClientOptions | None = None,
    ) -> PartitionKeyRangeSet:
        request = RequestSpec(
            verb=HttpVerb.GET,
            resource_type=ResourceType.PARTITION_KEY_RANGES,
            resource_id=collection_id,
            path=f"/dbs/{database_id}/colls/{collection_id}/pkranges",
            headers={
                "Accept": CONTENT_TYPE_JSON,
                HEADER_MAX_ITEM_COUNT: MAX_ITEM_COUNT_SERVER_DEFAULT,
            },
        )
        envelope = await self._runner.send(request, options=options)
        try:
            return PartitionKeyRangeSet.model_validate_json(envelope.body)
        except ValidationError as e:
            raise ResponseFormatError(
                f"Unexpected partition key range response for collection {collection_id}"
            ) from e

    async def full_range_header(
        self,
        database_id: str,
        collection_id: str,
        *,
        options: ClientOptions | None = None,
    ) -> str:
        """Value for ``x-ms-documentdb-partitionkeyrangeid`` targeting every range.

        Returns:
            ``"<rid>,<id1>,...,<idN>"``
        """
        ranges = await self.fetch_ranges(database_id, collection_id, options=options)
        return ranges.full_range_header()
