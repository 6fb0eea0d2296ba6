"""Custom claims models.

These are DTO models for the claims attached to a Firebase identity and the
role mirror document. Python field names are snake_case; the stored keys are
the camelCase aliases (facilityId, patientId, dateOfBirth).
"""

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Role(str, Enum):
    """Role stored in the ``role`` claim."""

    ADMIN = "admin"
    MEDICAL_STAFF = "medical_staff"
    PATIENT = "patient"


class ClaimType(str, Enum):
    """Identity type stored in the ``type`` claim, derived from the role."""

    STAFF = "staff"
    PATIENT = "patient"


STAFF_ROLES = frozenset({Role.ADMIN, Role.MEDICAL_STAFF})


class StaffClaims(BaseModel):
    """
    Claims for a staff identity.

    Examples:
        StaffClaims(facility_id="facility_001").to_claims()
        # {"role": "medical_staff", "facilityId": "facility_001", "type": "staff"}
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    claim_type: ClassVar[ClaimType] = ClaimType.STAFF

    role: Role = Field(default=Role.MEDICAL_STAFF, description="admin or medical_staff")
    facility_id: str = Field(..., alias="facilityId", description="Owning facility ID")

    @field_validator("role")
    @classmethod
    def validate_staff_role(cls, v: Role) -> Role:
        """Only staff roles can be assigned to a staff identity."""
        if v not in STAFF_ROLES:
            raise ValueError(f"Role '{v.value}' is not a staff role (expected admin or medical_staff)")
        return v

    def to_claims(self) -> dict[str, str]:
        """Get the complete claims object in stored (camelCase) form."""
        return {
            "role": self.role.value,
            "facilityId": self.facility_id,
            "type": self.claim_type.value,
        }


class PatientClaims(BaseModel):
    """
    Claims for a patient identity.

    ``date_of_birth`` is kept verbatim (ISO 8601 string, e.g. "1990-01-15T00:00:00.000Z").
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    claim_type: ClassVar[ClaimType] = ClaimType.PATIENT
    role: ClassVar[Role] = Role.PATIENT

    facility_id: str = Field(..., alias="facilityId", description="Owning facility ID")
    patient_id: str = Field(..., alias="patientId", description="Facility patient number")
    date_of_birth: str = Field(..., alias="dateOfBirth", description="ISO 8601 date of birth")

    def to_claims(self) -> dict[str, str]:
        """Get the complete claims object in stored (camelCase) form."""
        return {
            "role": self.role.value,
            "facilityId": self.facility_id,
            "patientId": self.patient_id,
            "dateOfBirth": self.date_of_birth,
            "type": self.claim_type.value,
        }


class ClaimsResult(BaseModel):
    """Success descriptor returned by the claims manager write operations."""

    success: bool = Field(..., description="True only when every write completed")
    message: str = Field(..., description="Human-readable outcome")
