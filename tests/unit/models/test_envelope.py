"""Unit tests for request/response models."""

from __future__ import annotations

import json

import pytest

from cosmosrest.core import HttpVerb, ResourceType
from cosmosrest.models import (
    ErrorBody,
    PageCollection,
    PartitionKeyRangeSet,
    RequestSpec,
    ResponseEnvelope,
)


class TestResponseEnvelope:
    def test_headers_case_insensitive_and_repeated(self):
        """Test header lookup is case-insensitive and keeps repeats."""
        envelope = ResponseEnvelope.build(
            200, [("X-Ms-Continuation", "a"), ("x-ms-continuation", "b")], ""
        )
        assert envelope.header_values("X-MS-CONTINUATION") == ("a", "b")
        assert envelope.header("x-ms-continuation") == "a, b"
        assert envelope.header("missing") is None

    def test_headers_are_read_only(self):
        """Test envelope headers cannot be mutated."""
        envelope = ResponseEnvelope.build(200, {"a": "1"})
        with pytest.raises(TypeError):
            envelope.headers["b"] = ("2",)

    @pytest.mark.parametrize(
        "status, ok, client, server",
        [
            (200, True, False, False),
            (304, True, False, False),
            (429, False, True, False),
            (503, False, False, True),
        ],
    )
    def test_status_classification(self, status, ok, client, server):
        """Test status classification helpers."""
        envelope = ResponseEnvelope(status=status)
        assert envelope.ok is ok
        assert envelope.is_client_error is client
        assert envelope.is_server_error is server

    def test_json(self):
        """Test json decodes the body."""
        assert ResponseEnvelope(status=200, body='{"id": "x"}').json() == {"id": "x"}


class TestErrorBody:
    def test_parse(self):
        """Test ErrorBody parses code and message."""
        error = ErrorBody.parse('{"code": "BadRequest", "message": "nope", "extra": 1}')
        assert error == ErrorBody(code="BadRequest", message="nope")

    @pytest.mark.parametrize("body", ["", "not json", "[1, 2]"])
    def test_parse_non_error_documents(self, body):
        """Test ErrorBody.parse returns None for other documents."""
        assert ErrorBody.parse(body) is None


class TestRequestSpec:
    def test_http_method_defaults_to_verb(self):
        """Test http_method defaults to the signed verb."""
        spec = RequestSpec(HttpVerb.GET, ResourceType.DOCUMENTS, "c", "/p")
        assert spec.http_method is HttpVerb.GET

    def test_method_override(self):
        """Test method override changes only the sent method."""
        spec = RequestSpec(HttpVerb.GET, ResourceType.DOCUMENTS, "c", "/p", method=HttpVerb.POST)
        assert spec.verb is HttpVerb.GET
        assert spec.http_method is HttpVerb.POST


class TestPartitionKeyRangeSet:
    def test_full_range_header(self):
        """Test range header joins rid and range ids."""
        ranges = PartitionKeyRangeSet.model_validate(
            {"_rid": "rid123", "PartitionKeyRanges": [{"id": "0"}, {"id": "1"}]}
        )
        assert ranges.full_range_header() == "rid123,0,1"

    def test_no_ranges(self):
        """Test an empty range list yields just the rid."""
        ranges = PartitionKeyRangeSet.model_validate({"_rid": "rid123"})
        assert ranges.full_range_header() == "rid123"


class TestPageCollection:
    def test_behaves_like_list(self):
        """Test PageCollection behaves like a list."""
        pages = PageCollection(['{"Documents": [1]}', '{"Documents": [2, 3]}'])
        assert pages == ['{"Documents": [1]}', '{"Documents": [2, 3]}']
        assert pages.continuations == []
        assert pages.fallback_used is False

    def test_documents_concatenates_pages(self):
        """Test documents concatenates every page."""
        pages = PageCollection(
            [json.dumps({"Documents": [{"id": "a"}]}), json.dumps({"Documents": [{"id": "b"}]})]
        )
        assert pages.documents() == [{"id": "a"}, {"id": "b"}]
