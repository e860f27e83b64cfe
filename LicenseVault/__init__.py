"""
LicenseVault Django project.

Encrypted license key storage with HMAC lookup tags.
"""
