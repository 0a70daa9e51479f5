import uuid

from django.db import models


class Payout(models.Model):
    STATUS_CHOICES = [
        ("pending", "Pending"),
        ("approved", "Approved"),
        ("paid", "Paid"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    affiliate = models.ForeignKey(
        "affiliates.Affiliate",
        on_delete=models.CASCADE,
        related_name="payouts",
    )
    period_start = models.DateField()
    period_end = models.DateField()
    revenue_cents = models.BigIntegerField(default=0)
    commission_cents = models.BigIntegerField(default=0)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="pending")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "payouts"
        ordering = ["-period_start"]
        unique_together = ("affiliate", "period_start", "period_end")
