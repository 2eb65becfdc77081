"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from cosmosrest.core import (
    ClientError,
    CosmosError,
    QueryCancelled,
    QueryError,
    RequestError,
    ServerError,
)
from cosmosrest.models import ResponseEnvelope


def test_client_error_from_envelope():
    """Test ClientError carries status and parsed error body."""
    envelope = ResponseEnvelope.build(
        404, {"x-ms-activity-id": "abc"}, '{"code": "NotFound", "message": "Resource Not Found"}'
    )
    error = ClientError.from_envelope(envelope)

    assert isinstance(error, ClientError)
    assert isinstance(error, RequestError)
    assert isinstance(error, CosmosError)
    assert error.status_code == 404
    assert error.code == "NotFound"
    assert str(error) == "HTTP 404: Resource Not Found"
    assert error.headers["x-ms-activity-id"] == ("abc",)


def test_server_error_with_plain_body():
    """Test ServerError tolerates a non-JSON body."""
    envelope = ResponseEnvelope(status=503, body="Service Unavailable")
    error = ServerError.from_envelope(envelope)

    assert error.code is None
    assert error.body == "Service Unavailable"
    assert "503" in str(error)


def test_query_error_copies_partial_pages():
    """Test QueryError keeps its own copy of partial pages."""
    pages = ["p1"]
    error = QueryError("failed", partial_pages=pages)
    pages.append("p2")

    assert error.partial_pages == ["p1"]


def test_query_cancelled_is_query_error():
    """Test QueryCancelled is a QueryError."""
    assert isinstance(QueryCancelled("stop"), QueryError)
