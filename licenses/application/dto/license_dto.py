"""
License DTOs for handler results.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime


@dataclass
class LicenseDTO:
    """DTO for license information (never carries the plaintext key)."""

    id: uuid.UUID
    team_id: uuid.UUID
    created_at: datetime


@dataclass
class IssuedLicenseDTO:
    """DTO for a newly issued license, the only time the key is returned unasked."""

    license: LicenseDTO
    license_key: str


@dataclass
class RevealedLicenseKeyDTO:
    """DTO for a decrypted license key."""

    license_id: uuid.UUID
    license_key: str
