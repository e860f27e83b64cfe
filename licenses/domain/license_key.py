"""
License key format.

License keys are five groups of five uppercase alphanumerics,
e.g. ``A1B2C-D3E4F-G5H6I-J7K8L-M9N0P``. Keys never contain a colon,
which keeps the lookup tag input ``<key>:<team_id>`` unambiguous.
"""

import re
import secrets
import string

LICENSE_KEY_ALPHABET = string.ascii_uppercase + string.digits
LICENSE_KEY_GROUPS = 5
LICENSE_KEY_GROUP_LENGTH = 5
LICENSE_KEY_PATTERN = re.compile(r"^[A-Z0-9]{5}-[A-Z0-9]{5}-[A-Z0-9]{5}-[A-Z0-9]{5}-[A-Z0-9]{5}$")


def generate_license_key() -> str:
    """
    Generate a license key in format: XXXXX-XXXXX-XXXXX-XXXXX-XXXXX.

    Returns:
        Generated license key string
    """
    parts = [
        "".join(secrets.choice(LICENSE_KEY_ALPHABET) for _ in range(LICENSE_KEY_GROUP_LENGTH))
        for _ in range(LICENSE_KEY_GROUPS)
    ]
    return "-".join(parts)


def is_valid_license_key(key: str) -> bool:
    """Check whether a string is a well-formed license key."""
    return isinstance(key, str) and bool(LICENSE_KEY_PATTERN.match(key))
