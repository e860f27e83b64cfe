"""
FindLicenseByKeyHandler.

Handler for searching a team's licenses by plaintext key.
"""

from typing import Optional

from core.domain.exceptions import InvalidLicenseKeyError
from core.infrastructure.crypto import LicenseKeyCipher
from licenses.application.dto.license_dto import LicenseDTO
from licenses.application.queries.find_license_by_key import FindLicenseByKeyQuery
from licenses.domain.license_key import is_valid_license_key
from licenses.ports.license_repository import LicenseRepository


class FindLicenseByKeyHandler:
    """Handler for FindLicenseByKeyQuery."""

    def __init__(self, cipher: LicenseKeyCipher, license_repository: LicenseRepository):
        """Initialize handler with cipher and repository."""
        self.cipher = cipher
        self.license_repository = license_repository

    async def handle(self, query: FindLicenseByKeyQuery) -> Optional[LicenseDTO]:
        """
        Handle find license by key query.

        Only the lookup tag is matched; no stored key is decrypted.

        Args:
            query: FindLicenseByKeyQuery

        Returns:
            LicenseDTO or None if no license matches

        Raises:
            InvalidLicenseKeyError: If the key is not in license key format
        """
        if not is_valid_license_key(query.license_key):
            raise InvalidLicenseKeyError("Invalid license key format")

        lookup = self.cipher.lookup_tag(query.license_key, query.team_id)
        license = await self.license_repository.find_by_lookup(query.team_id, lookup)
        if not license:
            return None

        return LicenseDTO(
            id=license.id,
            team_id=license.team_id,
            created_at=license.created_at,
        )
