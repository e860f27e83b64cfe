"""
Django implementation of LicenseRepository port.

This adapter converts between domain entities and Django ORM models.
"""
import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.db import IntegrityError, transaction

from core.domain.exceptions import LicenseKeyConflictError
from licenses.domain.license import License
from licenses.infrastructure.models import License as LicenseModel
from licenses.ports.license_repository import LicenseRepository


class DjangoLicenseRepository(LicenseRepository):
    """
    Django ORM implementation of LicenseRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: LicenseModel) -> License:
        """
        Convert Django model to domain entity.

        Args:
            model: Django License model

        Returns:
            License domain entity
        """
        return License(
            id=model.id,
            team_id=model.team_id,
            license_key=model.license_key,
            license_key_lookup=model.license_key_lookup,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, license: License) -> LicenseModel:
        """
        Convert domain entity to Django model.

        Args:
            license: License domain entity

        Returns:
            Django License model
        """
        model, created = LicenseModel.objects.get_or_create(
            id=license.id,
            defaults={
                "team_id": license.team_id,
                "license_key": license.license_key,
                "license_key_lookup": license.license_key_lookup,
            },
        )
        # Update if exists
        if not created:
            model.license_key = license.license_key
            model.license_key_lookup = license.license_key_lookup
        return model

    @sync_to_async
    def save(self, license: License) -> License:
        """
        Save a license entity.

        Args:
            license: License entity to save

        Returns:
            Saved license entity

        Raises:
            LicenseKeyConflictError: If the team already holds the lookup tag
        """
        try:
            with transaction.atomic():
                model = self._to_model(license)
                model.save()
        except IntegrityError as e:
            raise LicenseKeyConflictError() from e
        return self._to_domain(model)

    @sync_to_async
    def find_by_id(self, license_id: uuid.UUID) -> Optional[License]:
        """
        Find a license by ID.

        Args:
            license_id: License UUID

        Returns:
            License entity or None if not found
        """
        try:
            model = LicenseModel.objects.get(id=license_id)
            return self._to_domain(model)
        except LicenseModel.DoesNotExist:
            return None

    @sync_to_async
    def find_by_lookup(
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
        try:
            model = LicenseModel.objects.get(
                team_id=team_id, license_key_lookup=license_key_lookup
            )
            return self._to_domain(model)
        except LicenseModel.DoesNotExist:
            return None

    @sync_to_async
    def exists_by_lookup(
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
        return LicenseModel.objects.filter(
            team_id=team_id, license_key_lookup=license_key_lookup
        ).exists()

    @sync_to_async
    def list_by_team(self, team_id: uuid.UUID) -> List[License]:
        """
        List all licenses of a team.

        Args:
            team_id: Team UUID

        Returns:
            List of License entities, newest first
        """
        models = LicenseModel.objects.filter(team_id=team_id).order_by("-created_at")
        return [self._to_domain(model) for model in models]
