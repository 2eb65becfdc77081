"""Query execution with continuation paging and cross-partition fallback.

The executor walks a small state machine:

    INIT -> FIRST_PAGE -> PAGING* -> DONE
    FIRST_PAGE -> CROSS_PARTITION_FALLBACK -> PAGING* -> DONE

The first page is requested with GET. Every later page, and the fallback
request, is a POST carrying the same path and query body. Continuation
tokens are echoed back from the previous response, so pages are strictly
sequential.
"""

from __future__ import annotations

import asyncio
from time import perf_counter

from ...core.config import ClientOptions
from ...core.constants import (
    CROSS_PARTITION_ERROR_CODE,
    CROSS_PARTITION_GATEWAY_MESSAGE,
    HEADER_CONTINUATION,
    HEADER_PARTITION_KEY_RANGE_ID,
    HEADER_REQUEST_CHARGE,
)
from ...core.enums import HttpVerb, ResourceType
from ...core.exceptions import ClientError, CosmosError, QueryCancelled, QueryError, RequestError
from ...models import PageCollection, RequestSpec, ResponseEnvelope
from ..rest.runner import RestRunner
from .definitions import DocumentQuery, QueryState
from .resolver import PartitionRangeResolver
from .telemetry import log_fallback_triggered, log_page_fetched, log_query_complete, log_query_error


def is_cross_partition_gateway_error(error: ClientError) -> bool:
    """Whether ``error`` is the gateway's "cannot serve cross partition query" rejection."""
    if error.error is None or error.error.code != CROSS_PARTITION_ERROR_CODE:
        return False
    return CROSS_PARTITION_GATEWAY_MESSAGE in error.error.message.lower()


class QueryExecutor:
    """Runs document queries to completion.

    Each page request is signed afresh with the same (GET, docs, collection)
    triple, so a long-running query never carries an expired date.
    """

    def __init__(
        self,
        runner: RestRunner,
        resolver: PartitionRangeResolver | None = None,
    ) -> None:
        self._runner = runner
        self._resolver = resolver or PartitionRangeResolver(runner)

    async def run_query(
        self,
        database_id: str,
        collection_id: str,
        query: str,
        cross_partition: bool = False,
        partition_value: str | None = None,
        *,
        options: ClientOptions | None = None,
        cancel_event: asyncio.Event | None = None,
        max_pages: int | None = None,
    ) -> PageCollection:
        """Execute ``query`` and collect every page.

        Args:
            database_id: Database id
            collection_id: Collection id
            query: Query body, sent unchanged on every page
            cross_partition: Enable cross-partition execution
            partition_value: Single partition key value to target
            options: Per-call option overrides
            cancel_event: Checked before each page request
            max_pages: Stop with QueryError if more pages would be needed

        Returns:
            PageCollection of raw page bodies in retrieval order

        Raises:
            QueryCancelled: ``cancel_event`` was set between pages
            QueryError: Any unrecoverable failure; carries the pages fetched so far
        """
        spec = DocumentQuery(
            database_id=database_id,
            collection_id=collection_id,
            query=query,
            cross_partition=cross_partition,
            partition_value=partition_value,
        )
        return await self.execute(
            spec, options=options, cancel_event=cancel_event, max_pages=max_pages
        )

    async def execute(
        self,
        query: DocumentQuery,
        *,
        options: ClientOptions | None = None,
        cancel_event: asyncio.Event | None = None,
        max_pages: int | None = None,
    ) -> PageCollection:
        pages = PageCollection()
        headers = query.base_headers()
        state = QueryState.INIT
        continuation: str | None = None
        started = perf_counter()

        try:
            state = QueryState.FIRST_PAGE
            while state is not QueryState.DONE:
                if cancel_event is not None and cancel_event.is_set():
                    raise QueryCancelled(
                        f"Query on {query.path} cancelled after {len(pages)} page(s)",
                        partial_pages=pages,
                    )
                if max_pages is not None and len(pages) >= max_pages:
                    raise QueryError(
                        f"Query on {query.path} needs more than {max_pages} page(s)",
                        partial_pages=pages,
                    )

                if state is QueryState.FIRST_PAGE:
                    try:
                        envelope = await self._fetch_page(
                            query, headers, HttpVerb.GET, len(pages), options
                        )
                    except ClientError as e:
                        if query.cross_partition and is_cross_partition_gateway_error(e):
                            state = QueryState.CROSS_PARTITION_FALLBACK
                            continue
                        raise
                elif state is QueryState.CROSS_PARTITION_FALLBACK:
                    range_header = await self._resolver.full_range_header(
                        query.database_id, query.collection_id, options=options
                    )
                    log_fallback_triggered(query=query, range_header=range_header)
                    headers = {**headers, HEADER_PARTITION_KEY_RANGE_ID: range_header}
                    pages.fallback_used = True
                    envelope = await self._fetch_page(
                        query, headers, HttpVerb.POST, len(pages), options
                    )
                else:
                    pages.continuations.append(continuation)
                    headers = {**headers, HEADER_CONTINUATION: continuation}
                    envelope = await self._fetch_page(
                        query, headers, HttpVerb.POST, len(pages), options
                    )

                pages.append(envelope.body)
                continuation = envelope.header(HEADER_CONTINUATION)
                state = QueryState.PAGING if continuation is not None else QueryState.DONE
        except QueryError as e:
            log_query_error(
                query=query,
                state=state.value,
                pages_fetched=len(pages),
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise
        except CosmosError as e:
            log_query_error(
                query=query,
                state=state.value,
                pages_fetched=len(pages),
                error_type=type(e).__name__,
                error_message=str(e),
            )
            status = e.status_code if isinstance(e, RequestError) else None
            error = e.error if isinstance(e, RequestError) else None
            raise QueryError(
                f"Query on {query.path} failed: {e}",
                status_code=status,
                error=error,
                partial_pages=pages,
            ) from e

        log_query_complete(
            query=query,
            pages=len(pages),
            fallback_used=pages.fallback_used,
            total_latency_ms=(perf_counter() - started) * 1000.0,
        )
        return pages

    async def _fetch_page(
        self,
        query: DocumentQuery,
        headers: dict[str, str],
        method: HttpVerb,
        page_index: int,
        options: ClientOptions | None,
    ) -> ResponseEnvelope:
        request = RequestSpec(
            verb=HttpVerb.GET,
            resource_type=ResourceType.DOCUMENTS,
            resource_id=query.collection_id,
            path=query.path,
            body=query.query,
            headers=headers,
            method=method,
        )
        start = perf_counter()
        envelope = await self._runner.send(request, options=options)
        log_page_fetched(
            query=query,
            page_index=page_index,
            method=method.value,
            has_continuation=envelope.header(HEADER_CONTINUATION) is not None,
            request_charge=envelope.header(HEADER_REQUEST_CHARGE),
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return envelope
