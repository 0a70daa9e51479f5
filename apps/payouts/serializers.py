from rest_framework import serializers

from .models import Payout


class PayoutSerializer(serializers.ModelSerializer):
    class Meta:
        model = Payout
        fields = [
            "id",
            "period_start",
            "period_end",
            "revenue_cents",
            "commission_cents",
            "status",
        ]
