"""Base role mirror store interface."""

from abc import ABC, abstractmethod
from typing import Any


class BaseRoleStore(ABC):
    """
    Base interface for the user role mirror.

    The mirror is a denormalized copy of an identity's claims, one document per
    uid, kept for querying. Writes are merge-upserts that also stamp the
    document with a write timestamp.
    """

    def __init__(self, collection: str = "users", timestamp_field: str = "updatedAt"):
        """
        Initialize the store.

        Args:
            collection: Collection holding the mirror documents
            timestamp_field: Field that receives the write timestamp
        """
        self.collection = collection
        self.timestamp_field = timestamp_field

    @abstractmethod
    async def upsert_merge(self, document_id: str, fields: dict[str, Any]) -> None:
        """
        Create the document or merge ``fields`` into it.

        Fields not in ``fields`` are preserved. ``timestamp_field`` is always
        set to the write time.

        Args:
            document_id: Document ID (the identity uid)
            fields: Fields to write

        Raises:
            StoreError: If the write fails
        """
        pass

    @abstractmethod
    async def get_document(self, document_id: str) -> dict[str, Any] | None:
        """
        Get a mirror document.

        Args:
            document_id: Document ID (the identity uid)

        Returns:
            Document fields, or None if the document does not exist

        Raises:
            StoreError: If the read fails
        """
        pass
