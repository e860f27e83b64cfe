"""
Pytest configuration and shared fixtures.
"""

import uuid
from typing import Dict, List, Optional

import pytest

from core.domain.exceptions import LicenseKeyConflictError
from core.infrastructure.crypto import LicenseKeyCipher
from core.infrastructure.key_material import LicenseSecrets
from licenses.domain.license import License
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository
from licenses.ports.license_repository import LicenseRepository

TEST_ENCRYPTION_KEY = b"0123456789abcdef0123456789abcdef"
TEST_HMAC_KEY = b"lookup-hmac-key"


class InMemoryLicenseRepository(LicenseRepository):
    """LicenseRepository double backed by a dict."""

    def __init__(self):
        self.licenses: Dict[uuid.UUID, License] = {}

    async def save(self, license: License) -> License:
        for other in self.licenses.values():
            if (
                other.id != license.id
                and other.belongs_to(license.team_id)
                and other.license_key_lookup == license.license_key_lookup
            ):
                raise LicenseKeyConflictError()
        self.licenses[license.id] = license
        return license

    async def find_by_id(self, license_id: uuid.UUID) -> Optional[License]:
        return self.licenses.get(license_id)

    async def find_by_lookup(
        self, team_id: uuid.UUID, license_key_lookup: str
    ) -> Optional[License]:
        for license in self.licenses.values():
            if license.belongs_to(team_id) and license.license_key_lookup == license_key_lookup:
                return license
        return None

    async def exists_by_lookup(self, team_id: uuid.UUID, license_key_lookup: str) -> bool:
        return await self.find_by_lookup(team_id, license_key_lookup) is not None

    async def list_by_team(self, team_id: uuid.UUID) -> List[License]:
        licenses = [lic for lic in self.licenses.values() if lic.belongs_to(team_id)]
        return sorted(licenses, key=lambda lic: lic.created_at, reverse=True)


@pytest.fixture
def license_secrets():
    """Fixture for license key secret material."""
    return LicenseSecrets(encryption_key=TEST_ENCRYPTION_KEY, hmac_key=TEST_HMAC_KEY)


@pytest.fixture
def cipher(license_secrets):
    """Fixture for LicenseKeyCipher."""
    return LicenseKeyCipher(license_secrets)


@pytest.fixture
def team_id():
    """Fixture for a team (tenant) UUID."""
    return uuid.uuid4()


@pytest.fixture
def memory_license_repository():
    """Fixture for an in-memory LicenseRepository."""
    return InMemoryLicenseRepository()


@pytest.fixture
def license_repository():
    """Fixture for the Django LicenseRepository."""
    return DjangoLicenseRepository()


@pytest.fixture
def sample_license(cipher, team_id):
    """Fixture for a sample License entity with a known key."""
    key = "ABCDE-12345-FGHIJ-67890-KLMNO"
    return License.create(
        team_id=team_id,
        license_key=cipher.encrypt(key),
        license_key_lookup=cipher.lookup_tag(key, team_id),
    )


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
