"""
License key cryptography.

Authenticated encryption of license keys at rest (AES-256-GCM) and
deterministic lookup tags (HMAC-SHA256) for equality search over
encrypted keys.
"""
import hashlib
import hmac
import logging
import os
import uuid
from functools import lru_cache
from typing import Union

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from core.domain.exceptions import DecryptionError, EncryptionError, HmacError
from core.domain.value_objects import (
    AUTH_TAG_LENGTH,
    IV_LENGTH,
    LicenseKeyEnvelope,
)
from core.infrastructure.key_material import LicenseSecrets

logger = logging.getLogger(__name__)


class LicenseKeyCipher:
    """
    Encrypts, decrypts and tags license keys.

    Instances hold only immutable key material and are safe to share
    between threads and tasks.
    """

    def __init__(self, secrets: LicenseSecrets):
        """
        Initialize cipher with secret material.

        Args:
            secrets: Encryption and HMAC keys
        """
        self._aead = AESGCM(secrets.encryption_key)
        self._hmac_key = secrets.hmac_key

    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt a license key.

        A fresh random IV is drawn for every call.

        Args:
            plaintext: Plaintext license key

        Returns:
            Envelope string ``<iv>:<ciphertext>:<tag>``

        Raises:
            EncryptionError: If encryption fails
        """
        try:
            iv = os.urandom(IV_LENGTH)
            sealed = self._aead.encrypt(iv, plaintext.encode("utf-8"), None)
            envelope = LicenseKeyEnvelope(
                iv=iv,
                ciphertext=sealed[:-AUTH_TAG_LENGTH],
                tag=sealed[-AUTH_TAG_LENGTH:],
            )
            return envelope.encode()
        except Exception as e:
            logger.error(
                "License key encryption failed",
                extra={"error_type": type(e).__name__},
            )
            raise EncryptionError() from e

    def decrypt(self, envelope: str) -> str:
        """
        Decrypt a license key envelope.

        The authentication tag is verified before any plaintext is returned.

        Args:
            envelope: Envelope string produced by encrypt()

        Returns:
            Plaintext license key

        Raises:
            DecryptionError: If the envelope is malformed or fails authentication
        """
        try:
            parsed = LicenseKeyEnvelope.decode(envelope)
            plaintext = self._aead.decrypt(
                parsed.iv, parsed.ciphertext + parsed.tag, None
            )
            return plaintext.decode("utf-8")
        except Exception as e:
            logger.error(
                "License key decryption failed",
                extra={"error_type": type(e).__name__},
            )
            raise DecryptionError() from e

    def lookup_tag(self, plaintext: str, tenant_id: Union[str, uuid.UUID]) -> str:
        """
        Compute the lookup tag for a license key within a tenant.

        Args:
            plaintext: Plaintext license key
            tenant_id: Tenant (team) identifier

        Returns:
            64-character lowercase hex HMAC-SHA256 digest

        Raises:
            HmacError: If the digest cannot be computed
        """
        try:
            message = f"{plaintext}:{tenant_id}".encode("utf-8")
            return hmac.new(self._hmac_key, message, hashlib.sha256).hexdigest()
        except Exception as e:
            logger.error(
                "License key lookup tag generation failed",
                extra={"error_type": type(e).__name__},
            )
            raise HmacError() from e


@lru_cache(maxsize=None)
def get_license_key_cipher() -> LicenseKeyCipher:
    """
    Get the process-wide cipher built from Django settings.

    Returns:
        LicenseKeyCipher instance

    Raises:
        ImproperlyConfigured: If the secrets are missing or invalid
    """
    from django.conf import settings

    return LicenseKeyCipher(LicenseSecrets.from_settings(settings))
