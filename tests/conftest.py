"""Shared test fixtures and configuration."""

import os
from unittest.mock import MagicMock

import pytest

from facility_claims import (
    ClaimsManager,
    ClaimsSettings,
    InMemoryIdentityProvider,
    InMemoryRoleStore,
)

STAFF_UID = "staff_uid_12345"
ADMIN_UID = "admin_uid_67890"
PATIENT_UID = "patient_uid_11111"
FACILITY_ID = "facility_001"


@pytest.fixture
def claims_settings() -> ClaimsSettings:
    """Create test claims settings."""
    return ClaimsSettings(
        project_id="test-project",
        users_collection="users",
        timestamp_field="updatedAt",
        compensate_on_mirror_failure=False,
    )


@pytest.fixture
def identity_provider() -> InMemoryIdentityProvider:
    """Create in-memory identity provider with the sample identities."""
    return InMemoryIdentityProvider(uids=[STAFF_UID, ADMIN_UID, PATIENT_UID])


@pytest.fixture
def role_store() -> InMemoryRoleStore:
    """Create in-memory role mirror."""
    return InMemoryRoleStore()


@pytest.fixture
def mock_logger():
    """Create a logger that records calls."""
    return MagicMock()


@pytest.fixture
def claims_manager(identity_provider, role_store, claims_settings, mock_logger) -> ClaimsManager:
    """Create a claims manager over the in-memory provider and store."""
    return ClaimsManager(
        identity_provider,
        role_store,
        settings=claims_settings,
        logger=mock_logger,
    )


@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables after each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
