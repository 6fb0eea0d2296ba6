"""Role assignment on Firebase custom claims with a Firestore mirror.

Each write sets the identity's custom claims (full replace), then merges the
same fields into the ``users/{uid}`` mirror document. The two writes are not
atomic: a mirror failure after a successful claims write leaves them out of
sync unless ``compensate_on_mirror_failure`` is enabled.
"""

from typing import Any

from .config import ClaimsSettings
from .log import get_logger
from .models import ClaimsResult, PatientClaims, Role, StaffClaims
from .providers import BaseIdentityProvider, FirebaseIdentityProvider
from .stores import BaseRoleStore, FirestoreRoleStore


class ClaimsManager:
    """
    Assigns, revokes and reads role claims.

    Example usage:
        manager = ClaimsManager(provider, store, logger=logger)

        # Medical staff (default role) and facility admin
        await manager.assign_staff_role("staff_uid_12345", "facility_001")
        await manager.assign_staff_role("admin_uid_67890", "facility_001", role="admin")

        # Patient
        await manager.assign_patient_role(
            "patient_uid_11111", "facility_001", "P00123", "1990-01-15T00:00:00.000Z"
        )

        claims = await manager.read_role("staff_uid_12345")
        # {"role": "medical_staff", "facilityId": "facility_001", "type": "staff"}

        await manager.revoke_role("patient_uid_11111")
    """

    def __init__(
        self,
        provider: BaseIdentityProvider,
        store: BaseRoleStore,
        settings: ClaimsSettings | None = None,
        logger=None,
    ):
        """
        Initialize the claims manager.

        Args:
            provider: Identity provider holding the custom claims
            store: Role mirror store
            settings: Claims settings (defaults to ClaimsSettings())
            logger: Optional logger instance (defaults to a structlog logger)
        """
        self.provider = provider
        self.store = store
        self.settings = settings or ClaimsSettings()
        self.logger = logger or get_logger()

    @classmethod
    def from_settings(cls, settings: ClaimsSettings, logger=None) -> "ClaimsManager":
        """
        Build a manager wired to Firebase Authentication and Firestore.

        Args:
            settings: Claims settings
            logger: Optional logger instance

        Returns:
            ClaimsManager using the settings' Firebase App
        """
        app = settings.get_firebase_app()
        store = FirestoreRoleStore(
            settings.get_firestore_client(app),
            collection=settings.users_collection,
            timestamp_field=settings.timestamp_field,
        )
        return cls(FirebaseIdentityProvider(app), store, settings=settings, logger=logger)

    # ==================== WRITE OPERATIONS ====================

    async def assign_staff_role(
        self,
        uid: str,
        facility_id: str,
        role: Role | str = Role.MEDICAL_STAFF,
    ) -> ClaimsResult:
        """
        Assign a staff role (admin or medical_staff) to an identity.

        Args:
            uid: Identity ID
            facility_id: Facility ID
            role: "admin" or "medical_staff" (default)

        Returns:
            ClaimsResult with success=True

        Raises:
            pydantic.ValidationError: If role is not a staff role
            ProviderError: If setting the claims fails (the mirror is not written)
            StoreError: If the mirror write fails
        """
        try:
            claims = StaffClaims(role=role, facility_id=facility_id).to_claims()
            await self._set_claims_and_mirror(uid, claims)
            self.logger.info(
                "Staff claims set",
                uid=uid,
                role=claims["role"],
                facility_id=facility_id,
            )
            return ClaimsResult(success=True, message="Claims set successfully")
        except Exception as e:
            self.logger.error("Failed to set staff claims", uid=uid, error=str(e), exc_info=True)
            raise

    async def assign_patient_role(
        self,
        uid: str,
        facility_id: str,
        patient_id: str,
        date_of_birth: str,
    ) -> ClaimsResult:
        """
        Assign the patient role to an identity.

        Args:
            uid: Identity ID
            facility_id: Facility ID
            patient_id: Facility patient number
            date_of_birth: ISO 8601 date of birth, stored as given

        Returns:
            ClaimsResult with success=True

        Raises:
            ProviderError: If setting the claims fails (the mirror is not written)
            StoreError: If the mirror write fails
        """
        try:
            claims = PatientClaims(
                facility_id=facility_id,
                patient_id=patient_id,
                date_of_birth=date_of_birth,
            ).to_claims()
            await self._set_claims_and_mirror(uid, claims)
            self.logger.info("Patient claims set", uid=uid, patient_id=patient_id)
            return ClaimsResult(success=True, message="Patient claims set successfully")
        except Exception as e:
            self.logger.error(
                "Failed to set patient claims", uid=uid, error=str(e), exc_info=True
            )
            raise

    async def revoke_role(self, uid: str) -> ClaimsResult:
        """
        Remove all custom claims from an identity.

        The mirror document is left as is.

        Args:
            uid: Identity ID

        Returns:
            ClaimsResult with success=True

        Raises:
            ProviderError: If clearing the claims fails
        """
        try:
            await self.provider.set_custom_claims(uid, None)
            self.logger.info("Custom claims removed", uid=uid)
            return ClaimsResult(success=True, message="Claims removed successfully")
        except Exception as e:
            self.logger.error("Failed to remove custom claims", uid=uid, error=str(e), exc_info=True)
            raise

    # ==================== READ OPERATIONS ====================

    async def read_role(self, uid: str) -> dict[str, Any]:
        """
        Get the custom claims of an identity.

        Args:
            uid: Identity ID

        Returns:
            Claims dict, empty if no claims are set

        Raises:
            ProviderError: If the identity does not exist or the call fails
        """
        try:
            claims = await self.provider.get_custom_claims(uid)
        except Exception as e:
            self.logger.error("Failed to get custom claims", uid=uid, error=str(e), exc_info=True)
            raise
        return claims or {}

    async def read_role_record(self, uid: str) -> dict[str, Any] | None:
        """
        Get the role mirror document of an identity.

        Args:
            uid: Identity ID

        Returns:
            Mirror document fields, or None if no role was ever assigned

        Raises:
            StoreError: If the read fails
        """
        try:
            return await self.store.get_document(uid)
        except Exception as e:
            self.logger.error("Failed to get role record", uid=uid, error=str(e), exc_info=True)
            raise

    # ==================== INTERNAL ====================

    async def _set_claims_and_mirror(self, uid: str, claims: dict[str, Any]) -> None:
        """Set claims on the provider, then merge the same fields into the mirror."""
        compensate = self.settings.compensate_on_mirror_failure
        previous = await self.provider.get_custom_claims(uid) if compensate else None

        await self.provider.set_custom_claims(uid, claims)
        self.logger.debug("Custom claims written", uid=uid, role=claims["role"])

        try:
            await self.store.upsert_merge(uid, claims)
        except Exception:
            if compensate:
                await self._restore_claims(uid, previous)
            raise

    async def _restore_claims(self, uid: str, previous: dict[str, Any] | None) -> None:
        """Put back the claims that were set before a failed mirror write."""
        self.logger.warning("Mirror write failed, restoring previous claims", uid=uid)
        try:
            await self.provider.set_custom_claims(uid, previous)
        except Exception as e:
            # The mirror error is still raised by the caller
            self.logger.error(
                "Failed to restore previous claims", uid=uid, error=str(e), exc_info=True
            )
