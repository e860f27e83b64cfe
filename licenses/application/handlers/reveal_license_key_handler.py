"""
RevealLicenseKeyHandler.

Handler for decrypting a stored license key for display.
"""

import logging

from core.domain.exceptions import DecryptionError, LicenseNotFoundError
from core.infrastructure.crypto import LicenseKeyCipher
from licenses.application.dto.license_dto import RevealedLicenseKeyDTO
from licenses.application.queries.reveal_license_key import RevealLicenseKeyQuery
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)


class RevealLicenseKeyHandler:
    """Handler for RevealLicenseKeyQuery."""

    def __init__(self, cipher: LicenseKeyCipher, license_repository: LicenseRepository):
        """Initialize handler with cipher and repository."""
        self.cipher = cipher
        self.license_repository = license_repository

    async def handle(self, query: RevealLicenseKeyQuery) -> RevealedLicenseKeyDTO:
        """
        Handle reveal license key query.

        Args:
            query: RevealLicenseKeyQuery

        Returns:
            RevealedLicenseKeyDTO

        Raises:
            LicenseNotFoundError: If the license does not exist for the team
            DecryptionError: If the stored envelope is unreadable
        """
        license = await self.license_repository.find_by_id(query.license_id)
        if not license or not license.belongs_to(query.team_id):
            raise LicenseNotFoundError(f"License {query.license_id} not found")

        try:
            key = self.cipher.decrypt(license.license_key)
        except DecryptionError:
            logger.error(
                "Stored license key is unreadable",
                extra={"license_id": str(license.id), "team_id": str(license.team_id)},
            )
            raise

        return RevealedLicenseKeyDTO(license_id=license.id, license_key=key)
