"""Async client facade.

Architecture:
    CosmosClient wires the pieces together:
    MasterKeySigner -> RestRunner -> ThrottleGuard -> HTTPClient.
    Plain resource operations go through the ENDPOINTS table; document
    queries go through QueryExecutor, which adds continuation paging and the
    cross-partition fallback.

Design Decisions:
    - Every operation returns the raw response body; callers parse JSON
    - Options are immutable; ``options=`` on a call merges overrides into a
      new ClientOptions for that call only
    - Context manager pattern ensures the aiohttp session is closed
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

from ..auth import MasterKeySigner
from ..core.config import ClientOptions, Credentials
from ..models import PageCollection, PartitionKeyRangeSet
from ..runtime.paging import PartitionRangeResolver, QueryExecutor
from ..runtime.rest import HTTPClient, RestRunner, ThrottleGuard
from .endpoints import get_endpoint


class CosmosClient:
    """High-level async client for the document database REST API.

    Example:
        >>> async with CosmosClient(Credentials(host, key)) as client:
        ...     pages = await client.query_documents(
        ...         "db", "coll", '{"query": "SELECT * FROM c"}', cross_partition=True
        ...     )
        ...     docs = pages.documents()
    """

    def __init__(
        self,
        credentials: Credentials,
        options: ClientOptions | None = None,
        *,
        http: HTTPClient | None = None,
        signer: MasterKeySigner | None = None,
    ) -> None:
        self._credentials = credentials
        self._options = options or ClientOptions()
        self._http = http or HTTPClient(credentials.host, self._options)
        self._signer = signer or MasterKeySigner(credentials.private_key)
        self._guard = ThrottleGuard(self._http)
        self._runner = RestRunner(self._signer, self._guard)
        self._resolver = PartitionRangeResolver(self._runner)
        self._executor = QueryExecutor(self._runner, self._resolver)

    @property
    def options(self) -> ClientOptions:
        return self._options

    def _call_options(self, overrides: Mapping[str, Any] | None) -> ClientOptions:
        return self._options.merged(overrides)

    async def _call(
        self,
        endpoint_id: str,
        options: Mapping[str, Any] | None = None,
        **params: Any,
    ) -> str:
        envelope = await self._runner.run(
            spec=get_endpoint(endpoint_id),
            params=params,
            options=self._call_options(options),
        )
        return envelope.body

    # Account

    async def get_info(self, *, options: Mapping[str, Any] | None = None) -> str:
        return await self._call("get_info", options)

    # Queries

    async def query_documents(
        self,
        database_id: str,
        collection_id: str,
        query: str,
        cross_partition: bool = False,
        partition_value: str | None = None,
        *,
        options: Mapping[str, Any] | None = None,
        cancel_event: asyncio.Event | None = None,
        max_pages: int | None = None,
    ) -> PageCollection:
        """Run a query and return every page body.

        Args:
            database_id: Database id
            collection_id: Collection id
            query: Query body, e.g. ``{"query": "SELECT * FROM c", "parameters": []}``
            cross_partition: Allow the query to span partitions
            partition_value: Restrict the query to one partition key value
            options: Per-call option overrides
            cancel_event: Set it to stop before the next page request
            max_pages: Upper bound on pages fetched

        Raises:
            QueryError: The query could not be completed
        """
        return await self._executor.run_query(
            database_id,
            collection_id,
            query,
            cross_partition,
            partition_value,
            options=self._call_options(options),
            cancel_event=cancel_event,
            max_pages=max_pages,
        )

    async def get_partition_key_ranges(
        self, database_id: str, collection_id: str, *, options: Mapping[str, Any] | None = None
    ) -> PartitionKeyRangeSet:
        return await self._resolver.fetch_ranges(
            database_id, collection_id, options=self._call_options(options)
        )

    async def get_partition_key_full_range(
        self, database_id: str, collection_id: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._resolver.full_range_header(
            database_id, collection_id, options=self._call_options(options)
        )

    # Databases

    async def list_databases(self, *, options: Mapping[str, Any] | None = None) -> str:
        return await self._call("list_database", options)

    async def get_database(self, db: str, *, options: Mapping[str, Any] | None = None) -> str:
        return await self._call("get_database", options, db=db)

    async def create_database(self, body: str, *, options: Mapping[str, Any] | None = None) -> str:
        return await self._call("create_database", options, body=body)

    async def replace_database(
        self, db: str, body: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("replace_database", options, db=db, body=body)

    async def delete_database(self, db: str, *, options: Mapping[str, Any] | None = None) -> str:
        return await self._call("delete_database", options, db=db)

    # Users

    async def list_users(self, db: str, *, options: Mapping[str, Any] | None = None) -> str:
        return await self._call("list_user", options, db=db)

    async def get_user(
        self, db: str, user: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("get_user", options, db=db, user=user)

    async def create_user(
        self, db: str, body: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("create_user", options, db=db, body=body)

    async def replace_user(
        self, db: str, user: str, body: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("replace_user", options, db=db, user=user, body=body)

    async def delete_user(
        self, db: str, user: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("delete_user", options, db=db, user=user)

    # Collections

    async def list_collections(self, db: str, *, options: Mapping[str, Any] | None = None) -> str:
        return await self._call("list_collection", options, db=db)

    async def get_collection(
        self, db: str, coll: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("get_collection", options, db=db, coll=coll)

    async def create_collection(
        self, db: str, body: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("create_collection", options, db=db, body=body)

    async def delete_collection(
        self, db: str, coll: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("delete_collection", options, db=db, coll=coll)

    # Documents

    async def list_documents(
        self, db: str, coll: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("list_document", options, db=db, coll=coll)

    async def get_document(
        self, db: str, coll: str, doc: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("get_document", options, db=db, coll=coll, doc=doc)

    async def create_document(
        self,
        db: str,
        coll: str,
        body: str,
        partition_key: str | None = None,
        headers: Mapping[str, str] | None = None,
        *,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        return await self._call(
            "create_document",
            options,
            db=db,
            coll=coll,
            body=body,
            partition_key=partition_key,
            headers=headers,
        )

    async def replace_document(
        self,
        db: str,
        coll: str,
        doc: str,
        body: str,
        partition_key: str | None = None,
        headers: Mapping[str, str] | None = None,
        *,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        return await self._call(
            "replace_document",
            options,
            db=db,
            coll=coll,
            doc=doc,
            body=body,
            partition_key=partition_key,
            headers=headers,
        )

    async def delete_document(
        self,
        db: str,
        coll: str,
        doc: str,
        partition_key: str | None = None,
        headers: Mapping[str, str] | None = None,
        *,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        return await self._call(
            "delete_document",
            options,
            db=db,
            coll=coll,
            doc=doc,
            partition_key=partition_key,
            headers=headers,
        )

    # Attachments

    async def list_attachments(
        self, db: str, coll: str, doc: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("list_attachment", options, db=db, coll=coll, doc=doc)

    async def get_attachment(
        self,
        db: str,
        coll: str,
        doc: str,
        attachment: str,
        *,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        return await self._call(
            "get_attachment", options, db=db, coll=coll, doc=doc, attachment=attachment
        )

    async def create_attachment(
        self,
        db: str,
        coll: str,
        doc: str,
        content_type: str,
        filename: str,
        media: bytes | str,
        *,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        return await self._call(
            "create_attachment",
            options,
            db=db,
            coll=coll,
            doc=doc,
            content_type=content_type,
            filename=filename,
            body=media,
        )

    async def replace_attachment(
        self,
        db: str,
        coll: str,
        doc: str,
        attachment: str,
        content_type: str,
        filename: str,
        media: bytes | str,
        *,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        return await self._call(
            "replace_attachment",
            options,
            db=db,
            coll=coll,
            doc=doc,
            attachment=attachment,
            content_type=content_type,
            filename=filename,
            body=media,
        )

    async def delete_attachment(
        self,
        db: str,
        coll: str,
        doc: str,
        attachment: str,
        *,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        return await self._call(
            "delete_attachment", options, db=db, coll=coll, doc=doc, attachment=attachment
        )

    # Offers

    async def list_offers(self, *, options: Mapping[str, Any] | None = None) -> str:
        return await self._call("list_offer", options)

    async def get_offer(self, offer: str, *, options: Mapping[str, Any] | None = None) -> str:
        return await self._call("get_offer", options, offer=offer)

    async def replace_offer(
        self, offer: str, body: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("replace_offer", options, offer=offer, body=body)

    async def query_offers(self, body: str, *, options: Mapping[str, Any] | None = None) -> str:
        return await self._call("query_offers", options, body=body)

    # Permissions

    async def list_permissions(
        self, db: str, user: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("list_permission", options, db=db, user=user)

    async def get_permission(
        self, db: str, user: str, permission: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call(
            "get_permission", options, db=db, user=user, permission=permission
        )

    async def create_permission(
        self, db: str, user: str, body: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("create_permission", options, db=db, user=user, body=body)

    async def replace_permission(
        self,
        db: str,
        user: str,
        permission: str,
        body: str,
        *,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        return await self._call(
            "replace_permission", options, db=db, user=user, permission=permission, body=body
        )

    async def delete_permission(
        self, db: str, user: str, permission: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call(
            "delete_permission", options, db=db, user=user, permission=permission
        )

    # Stored procedures

    async def list_stored_procedures(
        self, db: str, coll: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("list_stored_procedure", options, db=db, coll=coll)

    async def create_stored_procedure(
        self, db: str, coll: str, body: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("create_stored_procedure", options, db=db, coll=coll, body=body)

    async def replace_stored_procedure(
        self, db: str, coll: str, sproc: str, body: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call(
            "replace_stored_procedure", options, db=db, coll=coll, sproc=sproc, body=body
        )

    async def delete_stored_procedure(
        self, db: str, coll: str, sproc: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("delete_stored_procedure", options, db=db, coll=coll, sproc=sproc)

    async def execute_stored_procedure(
        self, db: str, coll: str, sproc: str, body: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call(
            "execute_stored_procedure", options, db=db, coll=coll, sproc=sproc, body=body
        )

    # User defined functions

    async def list_user_defined_functions(
        self, db: str, coll: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("list_user_defined_function", options, db=db, coll=coll)

    async def create_user_defined_function(
        self, db: str, coll: str, body: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call(
            "create_user_defined_function", options, db=db, coll=coll, body=body
        )

    async def replace_user_defined_function(
        self, db: str, coll: str, udf: str, body: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call(
            "replace_user_defined_function", options, db=db, coll=coll, udf=udf, body=body
        )

    async def delete_user_defined_function(
        self, db: str, coll: str, udf: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call(
            "delete_user_defined_function", options, db=db, coll=coll, udf=udf
        )

    # Triggers

    async def list_triggers(
        self, db: str, coll: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("list_trigger", options, db=db, coll=coll)

    async def create_trigger(
        self, db: str, coll: str, body: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("create_trigger", options, db=db, coll=coll, body=body)

    async def replace_trigger(
        self, db: str, coll: str, trigger: str, body: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call(
            "replace_trigger", options, db=db, coll=coll, trigger=trigger, body=body
        )

    async def delete_trigger(
        self, db: str, coll: str, trigger: str, *, options: Mapping[str, Any] | None = None
    ) -> str:
        return await self._call("delete_trigger", options, db=db, coll=coll, trigger=trigger)

    # Lifecycle

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> CosmosClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
