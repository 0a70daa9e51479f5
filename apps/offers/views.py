from rest_framework import permissions, viewsets

from core.db import dashboard_db

from .models import Offer
from .serializers import OfferSerializer


class OfferViewSet(viewsets.ReadOnlyModelViewSet):
    """Active offers an affiliate can create links for."""

    serializer_class = OfferSerializer
    permission_classes = [permissions.IsAuthenticated]
    search_fields = ["name", "slug"]

    def get_queryset(self):
        return Offer.objects.using(dashboard_db()).filter(active=True)
