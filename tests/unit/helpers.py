"""Test doubles shared by the unit tests."""

from __future__ import annotations

import base64
import json
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime

from cosmosrest.core import ClientOptions
from cosmosrest.models import ResponseEnvelope

TEST_KEY = base64.b64encode(b"unit-test-master-key").decode("ascii")
FIXED_NOW = datetime(2024, 10, 21, 7, 26, 0, tzinfo=UTC)


@dataclass
class RecordedRequest:
    method: str
    path: str
    headers: dict[str, str]
    body: str | bytes | None
    options: ClientOptions | None = None


class FakeTransport:
    """Transport stub replaying canned envelopes and recording requests."""

    def __init__(self, responses: list[ResponseEnvelope], options: ClientOptions | None = None):
        self.options = options or ClientOptions()
        self._responses = list(responses)
        self.requests: list[RecordedRequest] = []
        self.closed = False

    async def request(
        self,
        method,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        body=None,
        options: ClientOptions | None = None,
    ) -> ResponseEnvelope:
        self.requests.append(RecordedRequest(str(method), path, dict(headers or {}), body, options))
        if not self._responses:
            raise AssertionError(f"Unexpected request: {method} {path}")
        return self._responses.pop(0)

    async def close(self) -> None:
        self.closed = True


class RecordingSleep:
    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


def ok(body: object = None, headers: Mapping[str, str] | None = None, status: int = 200):
    text = body if isinstance(body, str) else json.dumps(body if body is not None else {})
    return ResponseEnvelope.build(status=status, headers=headers or {}, body=text)


def error(status: int, code: str, message: str, headers: Mapping[str, str] | None = None):
    body = json.dumps({"code": code, "message": message})
    return ResponseEnvelope.build(status=status, headers=headers or {}, body=body)
