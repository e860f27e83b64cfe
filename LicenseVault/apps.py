"""
App configuration for LicenseVault.
"""

import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class LicenseVaultConfig(AppConfig):
    """App configuration for LicenseVault."""

    name = "LicenseVault"
    verbose_name = "License Vault"

    def ready(self):
        """
        Called when Django starts.

        Loads the license key secrets. A missing or malformed key raises
        ImproperlyConfigured and stops the process from starting.
        """
        from core.infrastructure.crypto import get_license_key_cipher

        get_license_key_cipher()
        logger.info("License key secrets loaded")
