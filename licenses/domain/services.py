"""
License domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
import logging
import uuid
from typing import Tuple

from core.domain.exceptions import LicenseKeyGenerationError
from core.infrastructure.crypto import LicenseKeyCipher
from licenses.domain.license import License
from licenses.domain.license_key import generate_license_key
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 10


class LicenseKeyIssuer:
    """Domain service for issuing license keys that are unused within a team."""

    def __init__(
        self,
        cipher: LicenseKeyCipher,
        repository: LicenseRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        """Initialize issuer with cipher and repository."""
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.cipher = cipher
        self.repository = repository
        self.max_attempts = max_attempts

    async def generate_unique_key(self, team_id: uuid.UUID) -> Tuple[str, str]:
        """
        Generate a license key not yet used by the team.

        The existence check and the later save are separate steps, so a
        concurrent issue can still store the same tag first. The unique
        constraint on (team_id, license_key_lookup) rejects the second save
        with LicenseKeyConflictError and IssueLicenseHandler retries.

        Args:
            team_id: Team UUID

        Returns:
            Tuple of (plaintext_key, lookup_tag)

        Raises:
            LicenseKeyGenerationError: If every attempt collided
        """
        for attempt in range(1, self.max_attempts + 1):
            key = generate_license_key()
            lookup = self.cipher.lookup_tag(key, team_id)
            if not await self.repository.exists_by_lookup(team_id, lookup):
                return key, lookup
            logger.warning(
                "Generated license key already in use, retrying",
                extra={"team_id": str(team_id), "attempt": attempt},
            )

        logger.error(
            "Failed to generate a unique license key",
            extra={"team_id": str(team_id), "attempts": self.max_attempts},
        )
        raise LicenseKeyGenerationError()

    async def issue(self, team_id: uuid.UUID) -> Tuple[License, str]:
        """
        Build a new license for a team.

        The returned entity carries only the envelope and the lookup tag;
        the plaintext key is returned next to it so it can be shown once.

        Args:
            team_id: Team UUID

        Returns:
            Tuple of (unsaved License entity, plaintext_key)
        """
        key, lookup = await self.generate_unique_key(team_id)
        envelope = self.cipher.encrypt(key)
        license = License.create(
            team_id=team_id,
            license_key=envelope,
            license_key_lookup=lookup,
        )
        return license, key
