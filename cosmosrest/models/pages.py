"""Query result container."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any


class PageCollection(list[str]):
    """Raw JSON page bodies in retrieval order.

    Behaves as a plain ``list[str]``; the extra attributes describe how the
    pages were obtained.

    Attributes:
        continuations: Continuation tokens that were followed, in order
        fallback_used: Whether the full partition range header was needed
    """

    def __init__(self, pages: Iterable[str] = ()) -> None:
        super().__init__(pages)
        self.continuations: list[str] = []
        self.fallback_used = False

    def documents(self) -> list[Any]:
        """Concatenate the ``Documents`` array of every page."""
        docs: list[Any] = []
        for page in self:
            docs.extend(json.loads(page).get("Documents", []))
        return docs
