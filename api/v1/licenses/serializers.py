"""
Serializers for license API endpoints.
"""

from rest_framework import serializers


class LicenseDTOSerializer(serializers.Serializer):
    """Serializer for LicenseDTO."""

    id = serializers.UUIDField()
    team_id = serializers.UUIDField()
    created_at = serializers.DateTimeField()


class IssuedLicenseResponseSerializer(serializers.Serializer):
    """Serializer for issue license response."""

    license = LicenseDTOSerializer()
    license_key = serializers.CharField()


class RevealedLicenseKeyResponseSerializer(serializers.Serializer):
    """Serializer for reveal license key response."""

    license_id = serializers.UUIDField()
    license_key = serializers.CharField()


class FindLicenseByKeyRequestSerializer(serializers.Serializer):
    """Serializer for license search query parameters."""

    license_key = serializers.CharField(required=True, max_length=64)
