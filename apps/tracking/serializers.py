from rest_framework import serializers

from .services import DEFAULT_CURRENCY, REVENUE_CENTS_MAX, REVENUE_CENTS_MIN


class ConversionReportSerializer(serializers.Serializer):
    link_id = serializers.UUIDField(
        error_messages={"required": "link_id is required.", "null": "link_id is required."},
    )
    session_id = serializers.CharField(
        error_messages={
            "required": "session_id is required.",
            "null": "session_id is required.",
            "blank": "session_id is required.",
        },
    )
    revenue_cents = serializers.IntegerField(
        required=False,
        default=0,
        min_value=REVENUE_CENTS_MIN,
        max_value=REVENUE_CENTS_MAX,
    )
    currency = serializers.CharField(max_length=3, required=False, default=DEFAULT_CURRENCY)
    external_order_id = serializers.CharField(
        max_length=255,
        required=False,
        allow_null=True,
        allow_blank=True,
    )
    meta = serializers.JSONField(required=False, allow_null=True)
