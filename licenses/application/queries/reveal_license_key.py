"""
RevealLicenseKeyQuery.

Query to decrypt a stored license key for display.
"""

import uuid
from dataclasses import dataclass


@dataclass
class RevealLicenseKeyQuery:
    """
    Query to reveal the plaintext key of a license.

    Note: team_id is taken from the caller's selected team.
    """

    team_id: uuid.UUID
    license_id: uuid.UUID
