"""Unit tests for master-key signing."""

from __future__ import annotations

import base64
import hashlib
import hmac
from datetime import UTC, datetime, timedelta, timezone
from urllib.parse import unquote_plus

import pytest

from cosmosrest.auth import MasterKeySigner, format_http_date, string_to_sign
from cosmosrest.core import ConfigurationError, HttpVerb, ResourceType

from tests.unit.helpers import FIXED_NOW, TEST_KEY


def _expected_signature(payload: str) -> str:
    key = base64.b64decode(TEST_KEY)
    digest = hmac.new(key, payload.lower().encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


class TestStringToSign:
    def test_layout_and_lower_case(self):
        """Test string-to-sign layout is lower-cased."""
        payload = string_to_sign("GET", "docs", "AbC==", "Mon, 21 Oct 2024 07:28:00 GMT")
        assert payload == "get\ndocs\nabc==\nmon, 21 oct 2024 07:28:00 gmt\n\n"

    @pytest.mark.parametrize("verb", list(HttpVerb))
    def test_ends_with_two_newlines(self, verb):
        """Test string-to-sign ends with an empty line."""
        payload = string_to_sign(verb, ResourceType.DOCUMENTS, "coll", "date")
        assert payload.endswith("date\n\n")
        assert not payload.endswith("\n\n\n")

    def test_enum_members_render_as_values(self):
        """Test enum members render as their wire values."""
        payload = string_to_sign(HttpVerb.POST, ResourceType.PARTITION_KEY_RANGES, "x", "d")
        assert payload.startswith("post\npkranges\n")


class TestFormatHttpDate:
    def test_rfc1123_gmt(self):
        """Test dates render in RFC 1123 GMT form."""
        moment = datetime(2024, 10, 21, 7, 28, 0, tzinfo=UTC)
        assert format_http_date(moment) == "Mon, 21 Oct 2024 07:28:00 GMT"

    def test_converts_other_timezones(self):
        """Test non-UTC datetimes are converted to GMT."""
        moment = datetime(2024, 10, 21, 9, 28, 0, tzinfo=timezone(timedelta(hours=2)))
        assert format_http_date(moment) == "Mon, 21 Oct 2024 07:28:00 GMT"


class TestMasterKeySigner:
    def test_date_is_two_minutes_ahead(self, signer):
        """Test the signed date is two minutes ahead of the clock."""
        headers = signer.sign(HttpVerb.GET, ResourceType.DOCUMENTS, "coll")
        assert headers["x-ms-date"] == format_http_date(FIXED_NOW + timedelta(minutes=2))

    @pytest.mark.parametrize("verb", list(HttpVerb))
    def test_signature_matches_independent_hmac(self, signer, verb):
        """Test the signature matches a hand-computed HMAC."""
        headers = signer.sign(verb, ResourceType.DOCUMENTS, "coll1")
        payload = f"{verb.value}\ndocs\ncoll1\n{headers['x-ms-date']}\n\n"

        token = unquote_plus(headers["authorization"])
        assert token == f"type=master&ver=1.0&sig={_expected_signature(payload)}"

    def test_deterministic_with_fixed_clock(self, signer):
        """Test signing is deterministic for a fixed clock."""
        first = signer.sign("GET", "colls", "abc")
        second = signer.sign("GET", "colls", "abc")
        assert first == second

    def test_fresh_date_per_call(self):
        """Test each call reads the clock again."""
        moments = iter([FIXED_NOW, FIXED_NOW + timedelta(seconds=5)])
        signer = MasterKeySigner(TEST_KEY, clock=lambda: next(moments))

        first = signer.sign("GET", "docs", "c")
        second = signer.sign("GET", "docs", "c")

        assert first["x-ms-date"] != second["x-ms-date"]
        assert first["authorization"] != second["authorization"]

    def test_authorization_is_url_encoded_single_token(self, signer):
        """Test the authorization token is URL-encoded."""
        auth = signer.sign("GET", "dbs", "")["authorization"]
        assert "&" not in auth
        assert "=" not in auth
        assert auth.startswith("type%3Dmaster%26ver%3D1.0%26sig%3D")

    def test_fixed_headers(self, signer):
        """Test sign returns the fixed protocol headers."""
        headers = signer.sign("GET", "dbs", "")
        assert headers["Accept"] == "application/json"
        assert headers["Cache-Control"] == "no-cache"
        assert headers["x-ms-version"] == "2018-12-31"
        assert headers["User-Agent"]

    def test_invalid_key_is_configuration_error(self):
        """Test a non-base64 key raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            MasterKeySigner("not base64!!")

    def test_empty_key_is_configuration_error(self):
        """Test an empty key raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            MasterKeySigner("")
