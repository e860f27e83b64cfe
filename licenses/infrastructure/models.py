"""
License model.
"""
import uuid

from django.db import models


class License(models.Model):
    """
    A license owned by a team.

    The license key is stored only as an encrypted envelope. Equality
    search goes through the indexed lookup tag.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    team_id = models.UUIDField(db_index=True)
    license_key = models.TextField(help_text="Encrypted license key envelope")
    license_key_lookup = models.CharField(
        max_length=64, db_index=True, help_text="HMAC lookup tag for equality search"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "licenses"
        db_table = "licenses"
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["team_id", "license_key_lookup"],
                name="unique_license_key_lookup_per_team",
            ),
        ]
        indexes = [
            models.Index(fields=["team_id", "license_key_lookup"], name="licenses_team_lookup_idx"),
        ]

    def __str__(self):
        return f"License {self.id} ({self.team_id})"
