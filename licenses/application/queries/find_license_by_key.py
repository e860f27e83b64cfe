"""
FindLicenseByKeyQuery.

Query to find a team's license by its plaintext key.
"""

import uuid
from dataclasses import dataclass


@dataclass
class FindLicenseByKeyQuery:
    """Query to find a license by the key a user typed in."""

    team_id: uuid.UUID
    license_key: str
