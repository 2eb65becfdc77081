"""Error document returned by the REST API."""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, ValidationError


class ErrorBody(BaseModel):
    """Parsed ``{"code": ..., "message": ...}`` error body."""

    code: str = ""
    message: str = ""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @classmethod
    def parse(cls, body: str) -> ErrorBody | None:
        """Parse an error body, returning None when it is not an error document."""
        if not body:
            return None
        try:
            data = json.loads(body)
        except ValueError:
            return None
        if not isinstance(data, dict):
            return None
        try:
            return cls.model_validate(data)
        except ValidationError:
            return None
