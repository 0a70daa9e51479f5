import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("affiliates", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Click",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("session_id", models.TextField()),
                ("ip", models.GenericIPAddressField(blank=True, null=True)),
                ("user_agent", models.TextField(blank=True, default="")),
                ("referer", models.TextField(blank=True, default="")),
                (
                    "device",
                    models.CharField(choices=[("mobile", "Mobile"), ("desktop", "Desktop")], max_length=20),
                ),
                ("utm_source", models.TextField(blank=True, null=True)),
                ("utm_medium", models.TextField(blank=True, null=True)),
                ("utm_campaign", models.TextField(blank=True, null=True)),
                ("utm_term", models.TextField(blank=True, null=True)),
                ("utm_content", models.TextField(blank=True, null=True)),
                ("subid", models.TextField(blank=True, null=True)),
                ("clicked_at", models.DateTimeField(auto_now_add=True)),
                (
                    "link",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="clicks",
                        to="affiliates.link",
                    ),
                ),
            ],
            options={
                "db_table": "clicks",
                "indexes": [
                    models.Index(fields=["session_id"], name="clicks_session_idx"),
                    models.Index(fields=["link", "clicked_at"], name="clicks_link_time_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Conversion",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("session_id", models.TextField()),
                ("revenue_cents", models.BigIntegerField(default=0)),
                ("currency", models.CharField(default="USD", max_length=3)),
                ("external_order_id", models.CharField(blank=True, max_length=255, null=True)),
                ("meta", models.JSONField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "link",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="conversions",
                        to="affiliates.link",
                    ),
                ),
            ],
            options={
                "db_table": "conversions",
                "indexes": [
                    models.Index(fields=["session_id"], name="conversions_session_idx"),
                    models.Index(fields=["link", "created_at"], name="conversions_link_time_idx"),
                ],
            },
        ),
    ]
