"""
IssueLicenseCommand.

Command to issue a new license key for a team.
"""

import uuid
from dataclasses import dataclass


@dataclass
class IssueLicenseCommand:
    """
    Command to issue a license.

    This command creates a license whose key is stored encrypted,
    together with the lookup tag used to search for it.
    """

    team_id: uuid.UUID
