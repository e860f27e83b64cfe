"""
License API views.

These endpoints are used by a team's dashboard to:
- Issue a new license key
- Reveal a stored license key
- Search licenses by plaintext key
"""

import uuid

from asgiref.sync import async_to_sync
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.licenses.serializers import (
    FindLicenseByKeyRequestSerializer,
    IssuedLicenseResponseSerializer,
    LicenseDTOSerializer,
    RevealedLicenseKeyResponseSerializer,
)
from core.domain.exceptions import LicenseNotFoundError
from core.infrastructure.crypto import get_license_key_cipher
from licenses.application.commands.issue_license import IssueLicenseCommand
from licenses.application.handlers.find_license_by_key_handler import FindLicenseByKeyHandler
from licenses.application.handlers.issue_license_handler import IssueLicenseHandler
from licenses.application.handlers.reveal_license_key_handler import RevealLicenseKeyHandler
from licenses.application.queries.find_license_by_key import FindLicenseByKeyQuery
from licenses.application.queries.reveal_license_key import RevealLicenseKeyQuery
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository

_license_repo = DjangoLicenseRepository()


class IssueLicenseView(APIView):
    """View for issuing a license key to a team."""

    def post(self, request: Request, team_id: uuid.UUID) -> Response:
        """Issue a license key. The plaintext key is only returned here."""
        return async_to_sync(self._handle_issue_license)(team_id)

    async def _handle_issue_license(self, team_id: uuid.UUID) -> Response:
        """Async handler for issue license."""
        handler = IssueLicenseHandler(
            cipher=get_license_key_cipher(),
            license_repository=_license_repo,
        )

        result = await handler.handle(IssueLicenseCommand(team_id=team_id))

        response_serializer = IssuedLicenseResponseSerializer(result)
        return Response(response_serializer.data, status=status.HTTP_201_CREATED)


class RevealLicenseKeyView(APIView):
    """View for revealing a stored license key."""

    def get(self, request: Request, team_id: uuid.UUID, license_id: uuid.UUID) -> Response:
        """Decrypt and return a team's license key."""
        return async_to_sync(self._handle_reveal_license_key)(team_id, license_id)

    async def _handle_reveal_license_key(
        self, team_id: uuid.UUID, license_id: uuid.UUID
    ) -> Response:
        """Async handler for reveal license key."""
        handler = RevealLicenseKeyHandler(get_license_key_cipher(), _license_repo)

        result = await handler.handle(
            RevealLicenseKeyQuery(team_id=team_id, license_id=license_id)
        )

        return Response(
            RevealedLicenseKeyResponseSerializer(result).data,
            status=status.HTTP_200_OK,
        )


class FindLicenseByKeyView(APIView):
    """View for searching a team's licenses by plaintext key."""

    def get(self, request: Request, team_id: uuid.UUID) -> Response:
        """Find the license holding a key. Stored keys are never decrypted."""
        return async_to_sync(self._handle_find_license_by_key)(request, team_id)

    async def _handle_find_license_by_key(self, request: Request, team_id: uuid.UUID) -> Response:
        """Async handler for find license by key."""
        serializer = FindLicenseByKeyRequestSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)

        handler = FindLicenseByKeyHandler(get_license_key_cipher(), _license_repo)

        result = await handler.handle(
            FindLicenseByKeyQuery(
                team_id=team_id,
                license_key=serializer.validated_data["license_key"],
            )
        )
        if result is None:
            raise LicenseNotFoundError()

        return Response(LicenseDTOSerializer(result).data, status=status.HTTP_200_OK)
