"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest

from cosmosrest.auth import MasterKeySigner
from cosmosrest.core import ClientOptions
from cosmosrest.models import ResponseEnvelope
from cosmosrest.runtime.rest import RestRunner, ThrottleGuard
from tests.unit.helpers import FIXED_NOW, TEST_KEY, FakeTransport, RecordingSleep


@pytest.fixture
def signer() -> MasterKeySigner:
    return MasterKeySigner(TEST_KEY, clock=lambda: FIXED_NOW)


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def make_runner(signer, recording_sleep):
    """Build a RestRunner over a FakeTransport replaying ``responses``."""

    def factory(responses: list[ResponseEnvelope], options: ClientOptions | None = None):
        transport = FakeTransport(responses, options)
        runner = RestRunner(signer, ThrottleGuard(transport, sleep=recording_sleep))
        return runner, transport

    return factory
