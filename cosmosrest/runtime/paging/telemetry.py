"""Structured logging for query execution."""

from __future__ import annotations

import logging

from .definitions import DocumentQuery

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    query: DocumentQuery,
    page_index: int,
    method: str,
    has_continuation: bool,
    request_charge: str | None = None,
    latency_ms: float | None = None,
) -> None:
    """Log one page retrieved.

    Args:
        query: Query being executed
        page_index: Zero-based index of the page
        method: HTTP method used for the page request
        has_continuation: Whether the response pointed at another page
        request_charge: Request units reported by the server
        latency_ms: Round-trip latency including throttle waits
    """
    logger.debug(
        "query_page_fetched",
        extra={
            "database_id": query.database_id,
            "collection_id": query.collection_id,
            "page_index": page_index,
            "method": method,
            "has_continuation": has_continuation,
            "request_charge": request_charge,
            "latency_ms": latency_ms,
        },
    )


def log_fallback_triggered(*, query: DocumentQuery, range_header: str) -> None:
    """Log a switch to explicit partition key ranges."""
    logger.info(
        "query_fallback_triggered",
        extra={
            "database_id": query.database_id,
            "collection_id": query.collection_id,
            "range_count": max(range_header.count(","), 0),
        },
    )


def log_query_complete(
    *,
    query: DocumentQuery,
    pages: int,
    fallback_used: bool,
    total_latency_ms: float | None = None,
) -> None:
    logger.info(
        "query_complete",
        extra={
            "database_id": query.database_id,
            "collection_id": query.collection_id,
            "pages": pages,
            "fallback_used": fallback_used,
            "total_latency_ms": total_latency_ms,
        },
    )


def log_query_error(
    *,
    query: DocumentQuery,
    state: str,
    pages_fetched: int,
    error_type: str,
    error_message: str,
) -> None:
    logger.error(
        "query_error",
        extra={
            "database_id": query.database_id,
            "collection_id": query.collection_id,
            "state": state,
            "pages_fetched": pages_fetched,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
