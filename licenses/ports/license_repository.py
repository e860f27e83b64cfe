"""
License repository port (interface).

This defines the contract for license persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
import uuid

from licenses.domain.license import License


class LicenseRepository(ABC):
    """
    Abstract repository for License entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save(self, license: License) -> License:
        """
        Save a license entity.

        Args:
            license: License entity to save

        Returns:
            Saved license entity

        Raises:
            LicenseKeyConflictError: If the team already holds the lookup tag
        """
        pass

    @abstractmethod
    async def find_by_id(self, license_id: uuid.UUID) -> Optional[License]:
        """
        Find a license by ID.

        Args:
            license_id: License UUID

        Returns:
            License entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_lookup(
        self, team_id: uuid.UUID, license_key_lookup: str
    ) -> Optional[License]:
        """
        Find a team's license by the lookup tag of its key.

        Args:
            team_id: Team UUID
            license_key_lookup: Lookup tag

        Returns:
            License entity or None if not found
        """
        pass

    @abstractmethod
    async def exists_by_lookup(
        self, team_id: uuid.UUID, license_key_lookup: str
    ) -> bool:
        """
        Check if a team already holds a license with the given lookup tag.

        Args:
            team_id: Team UUID
            license_key_lookup: Lookup tag

        Returns:
            True if a license exists, False otherwise
        """
        pass

    @abstractmethod
    async def list_by_team(self, team_id: uuid.UUID) -> List[License]:
        """
        List all licenses of a team.

        Args:
            team_id: Team UUID

        Returns:
            List of License entities, newest first
        """
        pass
