"""
License key secret material.

Holds the encryption key and the HMAC key used for license keys.
Both are loaded once from Django settings at startup and never change
for the lifetime of the process.
"""
from dataclasses import dataclass, field
from typing import Union

from django.core.exceptions import ImproperlyConfigured

ENCRYPTION_KEY_LENGTH = 32  # AES-256

ENCRYPTION_KEY_SETTING = "LICENSE_ENCRYPTION_KEY"
HMAC_KEY_SETTING = "LICENSE_HMAC_KEY"


def _to_bytes(name: str, value: Union[str, bytes]) -> bytes:
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    raise ImproperlyConfigured(f"{name} must be a string or bytes")


@dataclass(frozen=True)
class LicenseSecrets:
    """
    Encryption key and HMAC key for license keys.

    Values are excluded from repr so the object is safe to log.
    """

    encryption_key: bytes = field(repr=False)
    hmac_key: bytes = field(repr=False)

    def __post_init__(self):
        """Validate key material."""
        if len(self.encryption_key) != ENCRYPTION_KEY_LENGTH:
            raise ImproperlyConfigured(
                f"{ENCRYPTION_KEY_SETTING} must be exactly "
                f"{ENCRYPTION_KEY_LENGTH} bytes"
            )
        if not self.hmac_key:
            raise ImproperlyConfigured(f"{HMAC_KEY_SETTING} must not be empty")

    @classmethod
    def from_settings(cls, settings) -> "LicenseSecrets":
        """
        Load secrets from Django settings.

        Args:
            settings: Django settings object

        Returns:
            LicenseSecrets instance

        Raises:
            ImproperlyConfigured: If a key is missing or has the wrong length
        """
        encryption_key = getattr(settings, ENCRYPTION_KEY_SETTING, None)
        if not encryption_key:
            raise ImproperlyConfigured(f"{ENCRYPTION_KEY_SETTING} is not set")

        hmac_key = getattr(settings, HMAC_KEY_SETTING, None)
        if not hmac_key:
            raise ImproperlyConfigured(f"{HMAC_KEY_SETTING} is not set")

        return cls(
            encryption_key=_to_bytes(ENCRYPTION_KEY_SETTING, encryption_key),
            hmac_key=_to_bytes(HMAC_KEY_SETTING, hmac_key),
        )
