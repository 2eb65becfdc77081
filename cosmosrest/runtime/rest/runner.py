"""REST request runner using declarative endpoint specs."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from ...auth import MasterKeySigner
from ...core.config import ClientOptions
from ...core.constants import CONTENT_TYPE_JSON
from ...core.enums import HttpVerb, ResourceType
from ...models import RequestSpec, ResponseEnvelope
from .throttle import ThrottleGuard


@dataclass(frozen=True)
class ResourceEndpoint:
    id: str
    verb: HttpVerb
    resource_type: ResourceType
    build_path: Callable[[dict[str, Any]], str]
    # Id that is signed; for feeds and creates this is the parent's id
    build_resource_id: Callable[[dict[str, Any]], str]
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None
    body_param: str | None = None


class RestRunner:
    """Signs and executes requests through a ``ThrottleGuard``."""

    def __init__(self, signer: MasterKeySigner, guard: ThrottleGuard) -> None:
        self._signer = signer
        self._guard = guard

    @property
    def signer(self) -> MasterKeySigner:
        return self._signer

    def build_request(self, spec: ResourceEndpoint, params: dict[str, Any]) -> RequestSpec:
        headers = spec.build_headers(params) if spec.build_headers else {}
        body = params.get(spec.body_param) if spec.body_param else None
        if body is not None and not any(k.lower() == "content-type" for k in headers):
            # aiohttp would otherwise label raw bytes as octet-stream
            headers = {**headers, "Content-Type": CONTENT_TYPE_JSON}
        return RequestSpec(
            verb=spec.verb,
            resource_type=spec.resource_type,
            resource_id=spec.build_resource_id(params),
            path=spec.build_path(params),
            body=body,
            headers=headers,
        )

    async def send(
        self, request: RequestSpec, *, options: ClientOptions | None = None
    ) -> ResponseEnvelope:
        """Sign ``request`` with fresh auth headers and execute it.

        Auth headers take precedence over headers supplied on the request.
        """
        auth = self._signer.sign(request.verb, request.resource_type, request.resource_id)
        headers: Mapping[str, str] = {**request.headers, **auth}
        return await self._guard.execute(
            request.path,
            request.http_method,
            headers,
            request.body,
            options=options,
        )

    async def run(
        self,
        *,
        spec: ResourceEndpoint,
        params: dict[str, Any],
        options: ClientOptions | None = None,
    ) -> ResponseEnvelope:
        return await self.send(self.build_request(spec, params), options=options)
