"""Cloud Firestore role mirror store."""

from typing import Any

from google.api_core import exceptions as google_exceptions
from google.cloud import firestore

from ..exceptions import StoreError
from .base import BaseRoleStore


class FirestoreRoleStore(BaseRoleStore):
    """
    Role mirror backed by an async Firestore client.

    Example usage:
        settings = ClaimsSettings()
        store = FirestoreRoleStore(
            settings.get_firestore_client(),
            collection=settings.users_collection,
            timestamp_field=settings.timestamp_field,
        )

        await store.upsert_merge(uid, {"role": "patient", "facilityId": "f1"})
    """

    def __init__(self, client, collection: str = "users", timestamp_field: str = "updatedAt"):
        """
        Initialize Firestore store.

        Args:
            client: google.cloud.firestore.AsyncClient
            collection: Collection holding the mirror documents
            timestamp_field: Field that receives the server timestamp
        """
        super().__init__(collection=collection, timestamp_field=timestamp_field)
        self.client = client

    def _document(self, document_id: str):
        return self.client.collection(self.collection).document(document_id)

    async def upsert_merge(self, document_id: str, fields: dict[str, Any]) -> None:
        payload = dict(fields)
        payload[self.timestamp_field] = firestore.SERVER_TIMESTAMP

        try:
            await self._document(document_id).set(payload, merge=True)
        except google_exceptions.GoogleAPIError as e:
            raise StoreError(
                f"Failed to write {self.collection}/{document_id}: {e}", uid=document_id
            ) from e

    async def get_document(self, document_id: str) -> dict[str, Any] | None:
        try:
            snapshot = await self._document(document_id).get()
        except google_exceptions.GoogleAPIError as e:
            raise StoreError(
                f"Failed to read {self.collection}/{document_id}: {e}", uid=document_id
            ) from e
        return snapshot.to_dict() if snapshot.exists else None
