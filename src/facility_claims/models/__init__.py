"""Claims models."""

from .claims import STAFF_ROLES, ClaimsResult, ClaimType, PatientClaims, Role, StaffClaims

__all__ = [
    "Role",
    "ClaimType",
    "STAFF_ROLES",
    "StaffClaims",
    "PatientClaims",
    "ClaimsResult",
]
