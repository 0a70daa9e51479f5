from rest_framework import mixins, status, viewsets
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle

from apps.analytics.services import link_totals
from core.db import dashboard_db

from .mixins import AffiliateScopedMixin
from .models import Link
from .serializers import CreateLinkSerializer, LinkSerializer


class LinkViewSet(
    AffiliateScopedMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet,
):
    """
    An affiliate's tracking links with their lifetime click, conversion and
    revenue totals. Links are never edited once created.
    """

    serializer_class = LinkSerializer
    search_fields = ["short_code", "name", "offer__name", "offer__slug"]
    ordering_fields = ["created_at", "short_code"]
    throttle_scope = "link_generation"

    def get_queryset(self):
        if getattr(self, "swagger_fake_view", False):
            return Link.objects.none()
        return (
            Link.objects.using(dashboard_db())
            .select_related("affiliate", "offer")
            .filter(affiliate=self.get_affiliate())
        )

    def get_throttles(self):
        if self.action == "create":
            return [ScopedRateThrottle()]
        return super().get_throttles()

    def get_serializer_context(self):
        context = super().get_serializer_context()
        if getattr(self, "swagger_fake_view", False):
            return context
        context["metrics"] = link_totals(self.get_affiliate())
        return context

    def create(self, request: Request, *args, **kwargs) -> Response:
        serializer = CreateLinkSerializer(
            data=request.data,
            context={"request": request, "affiliate": self.get_affiliate()},
        )
        serializer.is_valid(raise_exception=True)
        link = serializer.save()
        link = self.get_queryset().get(pk=link.pk)
        return Response(self.get_serializer(link).data, status=status.HTTP_201_CREATED)
