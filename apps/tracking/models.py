from django.db import models


class Click(models.Model):
    DEVICE_CHOICES = (
        ("mobile", "Mobile"),
        ("desktop", "Desktop"),
    )

    id = models.BigAutoField(primary_key=True)
    link = models.ForeignKey(
        "affiliates.Link",
        on_delete=models.CASCADE,
        related_name="clicks",
    )
    session_id = models.TextField()
    ip = models.GenericIPAddressField(blank=True, null=True)
    user_agent = models.TextField(blank=True, default="")
    referer = models.TextField(blank=True, default="")
    device = models.CharField(max_length=20, choices=DEVICE_CHOICES)
    utm_source = models.TextField(blank=True, null=True)
    utm_medium = models.TextField(blank=True, null=True)
    utm_campaign = models.TextField(blank=True, null=True)
    utm_term = models.TextField(blank=True, null=True)
    utm_content = models.TextField(blank=True, null=True)
    subid = models.TextField(blank=True, null=True)
    clicked_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "clicks"
        indexes = [
            models.Index(fields=["session_id"], name="clicks_session_idx"),
            models.Index(fields=["link", "clicked_at"], name="clicks_link_time_idx"),
        ]


class Conversion(models.Model):
    id = models.BigAutoField(primary_key=True)
    link = models.ForeignKey(
        "affiliates.Link",
        on_delete=models.CASCADE,
        related_name="conversions",
    )
    session_id = models.TextField()
    revenue_cents = models.BigIntegerField(default=0)
    currency = models.CharField(max_length=3, default="USD")
    # Not unique: de-duplicating repeated reports is left to the caller.
    external_order_id = models.CharField(max_length=255, blank=True, null=True)
    meta = models.JSONField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "conversions"
        indexes = [
            models.Index(fields=["session_id"], name="conversions_session_idx"),
            models.Index(fields=["link", "created_at"], name="conversions_link_time_idx"),
        ]
