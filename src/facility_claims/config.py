"""Claims manager configuration settings."""

from typing import TypeVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

T = TypeVar("T", bound="ClaimsSettings")


class ClaimsSettings(BaseSettings):
    """
    Firebase and role-mirror settings with configurable environment prefix.

    Configuration precedence (highest to lowest):
    1. Environment variables ({PREFIX}*)
    2. .env file
    3. Default values

    Example usage:
        # Default (uses CLAIMS_* environment variables)
        settings = ClaimsSettings()

        # For the onboarding service (uses ONBOARDING_CLAIMS_* environment variables)
        settings = ClaimsSettings.with_prefix("ONBOARDING_CLAIMS_")

    Example .env file:
        CLAIMS_PROJECT_ID=my-clinic-project
        CLAIMS_CREDENTIALS_PATH=/secrets/service-account.json
        CLAIMS_USERS_COLLECTION=users
        CLAIMS_COMPENSATE_ON_MIRROR_FAILURE=false
    """

    model_config = SettingsConfigDict(
        env_prefix="CLAIMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==================== FIREBASE APP SETTINGS ====================

    project_id: str | None = Field(
        default=None,
        description="Firebase / Google Cloud project ID. If not set, taken from the credentials",
    )

    credentials_path: str | None = Field(
        default=None,
        description="Path to a service account JSON file. "
        "If not set, Application Default Credentials are used.",
    )

    app_name: str = Field(
        default="[DEFAULT]",
        description="Name of the firebase_admin App to initialize or reuse",
    )

    # ==================== ROLE MIRROR SETTINGS ====================

    database_id: str | None = Field(
        default=None,
        description="Firestore database ID. If not set, the (default) database is used",
    )

    users_collection: str = Field(
        default="users",
        description="Firestore collection holding the user role mirror documents",
    )

    timestamp_field: str = Field(
        default="updatedAt",
        description="Mirror document field that receives the server write timestamp",
    )

    compensate_on_mirror_failure: bool = Field(
        default=False,
        description="Restore the previous custom claims when the mirror write fails "
        "after the claims were already set. Disabled by default.",
    )

    # ==================== CLASS METHODS ====================

    @classmethod
    def with_prefix(cls: type[T], prefix: str) -> T:
        """
        Create settings instance with custom environment prefix.

        Args:
            prefix: Environment variable prefix (e.g., "ONBOARDING_CLAIMS_")

        Returns:
            ClaimsSettings instance configured with the specified prefix
        """

        class _PrefixedSettings(cls):
            model_config = SettingsConfigDict(
                env_prefix=prefix,
                env_file=".env",
                env_file_encoding="utf-8",
                case_sensitive=False,
                extra="ignore",
            )

        return _PrefixedSettings()

    # ==================== CLIENT FACTORIES ====================

    def get_firebase_app(self):
        """
        Get the firebase_admin App for these settings, initializing it on first use.

        The App is a process-wide handle; callers own its lifetime.

        Returns:
            firebase_admin.App instance
        """
        import firebase_admin
        from firebase_admin import credentials

        try:
            return firebase_admin.get_app(self.app_name)
        except ValueError:
            # Not initialized yet
            pass

        if self.credentials_path:
            credential = credentials.Certificate(self.credentials_path)
        else:
            credential = credentials.ApplicationDefault()

        options = {"projectId": self.project_id} if self.project_id else None
        return firebase_admin.initialize_app(credential, options, name=self.app_name)

    def get_firestore_client(self, app=None):
        """
        Get an async Firestore client bound to the Firebase App.

        Args:
            app: Optional firebase_admin App (defaults to get_firebase_app())

        Returns:
            google.cloud.firestore.AsyncClient instance
        """
        from firebase_admin import firestore_async

        return firestore_async.client(
            app=app or self.get_firebase_app(),
            database_id=self.database_id,
        )
