from rest_framework import serializers

from .models import AffiliateDailyStats


class DailyStatsSerializer(serializers.ModelSerializer):
    class Meta:
        model = AffiliateDailyStats
        fields = ["day", "clicks", "conversions", "revenue_cents"]
