"""
IssueLicenseHandler.

Handles the issue license command.
"""

import logging
import uuid
from typing import Optional, Tuple

from django.conf import settings

from core.domain.exceptions import LicenseKeyConflictError, LicenseKeyGenerationError
from core.infrastructure.crypto import LicenseKeyCipher
from licenses.application.commands.issue_license import IssueLicenseCommand
from licenses.application.dto.license_dto import IssuedLicenseDTO, LicenseDTO
from licenses.domain.license import License
from licenses.domain.services import DEFAULT_MAX_ATTEMPTS, LicenseKeyIssuer
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)


class IssueLicenseHandler:
    """Handler for IssueLicenseCommand."""

    def __init__(
        self,
        cipher: LicenseKeyCipher,
        license_repository: LicenseRepository,
        max_attempts: Optional[int] = None,
    ):
        """Initialize handler with cipher and repository."""
        if max_attempts is None:
            max_attempts = getattr(settings, "LICENSE_KEY_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS)
        self.license_repository = license_repository
        self.issuer = LicenseKeyIssuer(
            cipher=cipher,
            repository=license_repository,
            max_attempts=max_attempts,
        )

    async def handle(self, command: IssueLicenseCommand) -> IssuedLicenseDTO:
        """
        Handle issue license command.

        Args:
            command: IssueLicenseCommand

        Returns:
            IssuedLicenseDTO with the stored license and its plaintext key

        Raises:
            LicenseKeyGenerationError: If no unused key could be generated
            EncryptionError: If the key could not be encrypted
            HmacError: If the lookup tag could not be computed
        """
        saved, key = await self._issue_and_save(command.team_id)

        logger.info(
            "License issued",
            extra={"license_id": str(saved.id), "team_id": str(saved.team_id)},
        )

        return IssuedLicenseDTO(
            license=LicenseDTO(
                id=saved.id,
                team_id=saved.team_id,
                created_at=saved.created_at,
            ),
            license_key=key,
        )

    async def _issue_and_save(self, team_id: uuid.UUID) -> Tuple[License, str]:
        """
        Issue a key and persist it, retrying when a concurrent issue for the
        same team stored the same lookup tag between the check and the save.
        """
        for attempt in range(1, self.issuer.max_attempts + 1):
            # Nothing is persisted unless both envelope and tag were produced
            license, key = await self.issuer.issue(team_id)
            try:
                return await self.license_repository.save(license), key
            except LicenseKeyConflictError:
                logger.warning(
                    "License key stored concurrently, retrying",
                    extra={"team_id": str(team_id), "attempt": attempt},
                )

        raise LicenseKeyGenerationError()
