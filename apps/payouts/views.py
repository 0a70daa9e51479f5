from rest_framework import viewsets

from apps.affiliates.mixins import AffiliateScopedMixin
from core.db import dashboard_db

from .models import Payout
from .serializers import PayoutSerializer


class PayoutViewSet(AffiliateScopedMixin, viewsets.ReadOnlyModelViewSet):
    serializer_class = PayoutSerializer
    filterset_fields = ["status"]

    def get_queryset(self):
        if getattr(self, "swagger_fake_view", False):
            return Payout.objects.none()
        return (
            Payout.objects.using(dashboard_db())
            .filter(affiliate=self.get_affiliate())
            .order_by("-period_start")
        )
