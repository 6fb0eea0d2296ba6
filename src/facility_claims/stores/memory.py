"""In-memory role mirror store for development and testing."""

import copy
from datetime import datetime, timezone
from typing import Any

from .base import BaseRoleStore


class InMemoryRoleStore(BaseRoleStore):
    """
    In-memory role mirror with Firestore ``set(..., merge=True)`` semantics.

    ``documents`` maps document ID to fields. Every write is appended to
    ``writes`` as ``(document_id, fields)``.
    """

    def __init__(self, collection: str = "users", timestamp_field: str = "updatedAt"):
        super().__init__(collection=collection, timestamp_field=timestamp_field)
        self.documents: dict[str, dict[str, Any]] = {}
        self.writes: list[tuple[str, dict[str, Any]]] = []

    async def upsert_merge(self, document_id: str, fields: dict[str, Any]) -> None:
        self.writes.append((document_id, copy.deepcopy(fields)))
        document = self.documents.setdefault(document_id, {})
        document.update(copy.deepcopy(fields))
        document[self.timestamp_field] = datetime.now(timezone.utc)

    async def get_document(self, document_id: str) -> dict[str, Any] | None:
        document = self.documents.get(document_id)
        return copy.deepcopy(document) if document is not None else None
