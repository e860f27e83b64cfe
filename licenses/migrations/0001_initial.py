import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="License",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("team_id", models.UUIDField(db_index=True)),
                (
                    "license_key",
                    models.TextField(help_text="Encrypted license key envelope"),
                ),
                (
                    "license_key_lookup",
                    models.CharField(
                        db_index=True,
                        help_text="HMAC lookup tag for equality search",
                        max_length=64,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "licenses",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["team_id", "license_key_lookup"],
                        name="licenses_team_lookup_idx",
                    )
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("team_id", "license_key_lookup"),
                        name="unique_license_key_lookup_per_team",
                    )
                ],
            },
        ),
    ]
