from rest_framework import serializers

from apps.offers.models import Offer
from apps.offers.serializers import OfferSerializer
from core.db import dashboard_db

from .models import Link
from .services import create_link, short_url, vanity_url


class ActiveOfferField(serializers.PrimaryKeyRelatedField):
    def get_queryset(self):
        return Offer.objects.using(dashboard_db()).filter(active=True)


class LinkSerializer(serializers.ModelSerializer):
    offer = OfferSerializer(read_only=True)
    short_url = serializers.SerializerMethodField()
    vanity_url = serializers.SerializerMethodField()
    clicks = serializers.SerializerMethodField()
    conversions = serializers.SerializerMethodField()
    revenue_cents = serializers.SerializerMethodField()

    class Meta:
        model = Link
        fields = [
            "id",
            "short_code",
            "name",
            "offer",
            "short_url",
            "vanity_url",
            "clicks",
            "conversions",
            "revenue_cents",
            "created_at",
        ]
        read_only_fields = fields

    def get_short_url(self, link: Link) -> str:
        return short_url(link.short_code)

    def get_vanity_url(self, link: Link) -> str:
        return vanity_url(link.affiliate.code, link.offer.slug)

    def _metric(self, link: Link, field: str) -> int:
        row = self.context.get("metrics", {}).get(link.id)
        if row is None:
            return 0
        return getattr(row, field) or 0

    def get_clicks(self, link: Link) -> int:
        return self._metric(link, "clicks")

    def get_conversions(self, link: Link) -> int:
        return self._metric(link, "conversions")

    def get_revenue_cents(self, link: Link) -> int:
        return self._metric(link, "revenue_cents")


class CreateLinkSerializer(serializers.Serializer):
    offer_id = ActiveOfferField()
    name = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)

    def create(self, validated_data):
        affiliate = self.context["affiliate"]
        return create_link(
            affiliate=affiliate,
            offer=validated_data["offer_id"],
            name=validated_data.get("name"),
        )
