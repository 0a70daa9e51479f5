from django.db import models


class AffiliateLinkTotals(models.Model):
    """Lifetime totals per link, read from the `v_affiliate_totals` view."""

    link_id = models.UUIDField(primary_key=True)
    affiliate_id = models.UUIDField()
    clicks = models.BigIntegerField()
    conversions = models.BigIntegerField()
    revenue_cents = models.BigIntegerField()

    class Meta:
        managed = False
        db_table = "v_affiliate_totals"


class AffiliateDailyStats(models.Model):
    """Per-affiliate UTC-day totals, read from the `v_affiliate_stats_daily` view."""

    id = models.CharField(max_length=100, primary_key=True)
    affiliate_id = models.UUIDField()
    day = models.DateField()
    clicks = models.BigIntegerField()
    conversions = models.BigIntegerField()
    revenue_cents = models.BigIntegerField()

    class Meta:
        managed = False
        db_table = "v_affiliate_stats_daily"
        ordering = ["day"]
