"""Identifier generation shared by every repository implementation."""

from __future__ import annotations

import uuid
from collections.abc import Iterable


class IdGenerator:
    """Hands out opaque string IDs that are never handed out twice.

    Every issued ID is remembered, including those of records that were
    later deleted, so an ID can't come back even on a UUID collision.
    """

    def __init__(self, issued: Iterable[str] = ()) -> None:
        self._issued: set[str] = set(issued)

    def next_id(self) -> str:
        while True:
            candidate = str(uuid.uuid4())
            if candidate not in self._issued:
                self._issued.add(candidate)
                return candidate

    @property
    def issued(self) -> frozenset[str]:
        return frozenset(self._issued)
