"""Tests for ClaimsSettings."""

import inspect
import os
from unittest.mock import MagicMock, patch

from facility_claims import ClaimsSettings


class TestClaimsSettings:
    def test_defaults(self):
        settings = ClaimsSettings(_env_file=None)

        assert settings.users_collection == "users"
        assert settings.timestamp_field == "updatedAt"
        assert settings.app_name == "[DEFAULT]"
        assert settings.compensate_on_mirror_failure is False

    def test_reads_default_prefix(self):
        os.environ["CLAIMS_USERS_COLLECTION"] = "members"
        os.environ["CLAIMS_COMPENSATE_ON_MIRROR_FAILURE"] = "true"

        settings = ClaimsSettings(_env_file=None)

        assert settings.users_collection == "members"
        assert settings.compensate_on_mirror_failure is True

    def test_with_prefix(self):
        os.environ["ONBOARDING_CLAIMS_PROJECT_ID"] = "clinic-prod"
        os.environ["CLAIMS_PROJECT_ID"] = "ignored"

        settings = ClaimsSettings.with_prefix("ONBOARDING_CLAIMS_")

        assert settings.project_id == "clinic-prod"
        assert isinstance(settings, ClaimsSettings)


class TestFirebaseApp:
    def test_reuses_initialized_app(self):
        existing = MagicMock()

        with (
            patch("firebase_admin.get_app", return_value=existing) as get_app,
            patch("firebase_admin.initialize_app") as initialize_app,
        ):
            app = ClaimsSettings(app_name="claims").get_firebase_app()

        assert app is existing
        get_app.assert_called_once_with("claims")
        initialize_app.assert_not_called()

    def test_initializes_with_service_account(self):
        settings = ClaimsSettings(credentials_path="/secrets/sa.json", project_id="clinic-prod")

        with (
            patch("firebase_admin.get_app", side_effect=ValueError("no app")),
            patch("firebase_admin.credentials.Certificate") as certificate,
            patch("firebase_admin.initialize_app") as initialize_app,
        ):
            settings.get_firebase_app()

        certificate.assert_called_once_with("/secrets/sa.json")
        initialize_app.assert_called_once_with(
            certificate.return_value, {"projectId": "clinic-prod"}, name="[DEFAULT]"
        )

    def test_initializes_with_application_default(self):
        with (
            patch("firebase_admin.get_app", side_effect=ValueError("no app")),
            patch("firebase_admin.credentials.ApplicationDefault") as application_default,
            patch("firebase_admin.initialize_app") as initialize_app,
        ):
            ClaimsSettings(_env_file=None).get_firebase_app()

        initialize_app.assert_called_once_with(
            application_default.return_value, None, name="[DEFAULT]"
        )

    def test_firestore_client(self):
        app = MagicMock()

        with patch("firebase_admin.firestore_async.client") as client:
            ClaimsSettings(database_id="roles-db").get_firestore_client(app)

        client.assert_called_once_with(app=app, database_id="roles-db")

    def test_firestore_client_accepts_database_id(self):
        from firebase_admin import firestore_async

        parameters = inspect.signature(firestore_async.client).parameters

        assert "database_id" in parameters
