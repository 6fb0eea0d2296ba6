"""facility-claims: role custom claims for Firebase identities.

This package provides:
- Staff and patient role assignment as Firebase Authentication custom claims
- A Firestore mirror of each identity's role for querying
- Pluggable identity providers and role stores (Firebase/Firestore, in-memory)
- Configurable environment prefixes
"""

from importlib.metadata import PackageNotFoundError, version

from .config import ClaimsSettings
from .exceptions import ClaimsError, ProviderError, StoreError
from .manager import ClaimsManager
from .models import STAFF_ROLES, ClaimsResult, ClaimType, PatientClaims, Role, StaffClaims
from .providers import BaseIdentityProvider, FirebaseIdentityProvider, InMemoryIdentityProvider
from .stores import BaseRoleStore, FirestoreRoleStore, InMemoryRoleStore

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("facility-claims")
except PackageNotFoundError:
    # Package is not installed, fallback for development
    __version__ = "0.0.0+dev"

__all__ = [
    # Configuration
    "ClaimsSettings",
    # Errors
    "ClaimsError",
    "ProviderError",
    "StoreError",
    # Models
    "Role",
    "ClaimType",
    "STAFF_ROLES",
    "StaffClaims",
    "PatientClaims",
    "ClaimsResult",
    # Providers
    "BaseIdentityProvider",
    "FirebaseIdentityProvider",
    "InMemoryIdentityProvider",
    # Stores
    "BaseRoleStore",
    "FirestoreRoleStore",
    "InMemoryRoleStore",
    # Manager
    "ClaimsManager",
]
