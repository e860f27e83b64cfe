"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class CryptographyError(DomainException):
    """
    Base exception for license key cryptography failures.

    Messages are generic and must never carry key material, plaintext
    or envelope contents.
    """

    pass


class EncryptionError(CryptographyError):
    """Raised when a license key cannot be encrypted."""

    def __init__(self, message: str = "Encryption failed"):
        super().__init__(message, code="ENCRYPTION_FAILED")


class DecryptionError(CryptographyError):
    """Raised when an envelope is malformed or fails authentication."""

    def __init__(self, message: str = "Decryption failed"):
        super().__init__(message, code="DECRYPTION_FAILED")


class HmacError(CryptographyError):
    """Raised when a lookup tag cannot be computed."""

    def __init__(self, message: str = "HMAC generation failed"):
        super().__init__(message, code="HMAC_FAILED")


class LicenseException(DomainException):
    """Base exception for license-related errors."""

    pass


class LicenseNotFoundError(LicenseException):
    """Raised when a license is not found."""

    def __init__(self, message: str = "License not found"):
        super().__init__(message, code="LICENSE_NOT_FOUND")


class InvalidLicenseKeyError(LicenseException):
    """Raised when a license key is invalid."""

    def __init__(self, message: str = "Invalid license key"):
        super().__init__(message, code="INVALID_LICENSE_KEY")


class LicenseKeyGenerationError(LicenseException):
    """Raised when no unused license key could be generated for a team."""

    def __init__(self, message: str = "Failed to generate a unique license key"):
        super().__init__(message, code="LICENSE_KEY_GENERATION_FAILED")


class LicenseKeyConflictError(LicenseException):
    """Raised when a team already holds a license with the same lookup tag."""

    def __init__(self, message: str = "License key already in use"):
        super().__init__(message, code="LICENSE_KEY_CONFLICT")
