"""
License domain entity.

This is the core domain entity representing a license.
It contains business logic and is independent of infrastructure.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from core.domain.value_objects import LicenseKeyEnvelope, LookupTag


@dataclass(frozen=True)
class License:
    """
    License domain entity.

    The license key is only ever held as an encrypted envelope next to
    its lookup tag. The plaintext key is never part of the entity.
    """

    id: uuid.UUID
    team_id: uuid.UUID
    license_key: str
    license_key_lookup: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """
        Validate license entity.

        The envelope is not parsed here: a stored record whose envelope
        is unreadable still loads, and fails with DecryptionError only
        when it is decrypted.
        """
        if not self.team_id:
            raise ValueError("Team ID is required")
        if not isinstance(self.license_key, str):
            raise ValueError("License key envelope must be a string")

    @classmethod
    def create(
        cls,
        team_id: uuid.UUID,
        license_key: str,
        license_key_lookup: str,
        license_id: Optional[uuid.UUID] = None,
    ) -> "License":
        """
        Create a new License entity.

        Args:
            team_id: Team (tenant) UUID
            license_key: Encrypted license key envelope
            license_key_lookup: Lookup tag for the plaintext key
            license_id: Optional UUID (generated if not provided)

        Returns:
            License entity instance

        Raises:
            ValueError: If the envelope or lookup tag is malformed
        """
        try:
            LicenseKeyEnvelope.decode(license_key)
        except ValueError as e:
            raise ValueError("Invalid license key envelope") from e
        LookupTag(license_key_lookup)

        now = datetime.now(timezone.utc)
        return cls(
            id=license_id or uuid.uuid4(),
            team_id=team_id,
            license_key=license_key,
            license_key_lookup=license_key_lookup,
            created_at=now,
            updated_at=now,
        )

    def belongs_to(self, team_id: uuid.UUID) -> bool:
        """Check if the license is owned by a team."""
        return str(self.team_id) == str(team_id)
