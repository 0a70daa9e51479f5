from datetime import timedelta

from django.utils import timezone
from rest_framework import generics
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from apps.affiliates.mixins import AffiliateScopedMixin

from .filters import DailyStatsFilter
from .models import AffiliateDailyStats
from .serializers import DailyStatsSerializer
from .services import daily_stats, summarize

DEFAULT_RANGE_DAYS = 30


class OverviewView(AffiliateScopedMixin, generics.GenericAPIView):
    """
    Dashboard overview: daily clicks, conversions and revenue for a date range
    (the last 30 days by default) plus range totals, EPC and CVR.
    """

    serializer_class = DailyStatsSerializer
    filterset_class = DailyStatsFilter
    pagination_class = None

    def get_queryset(self):
        if getattr(self, "swagger_fake_view", False):
            return AffiliateDailyStats.objects.none()
        return daily_stats(self.get_affiliate())

    def get(self, request, *args, **kwargs):
        today = timezone.localdate()
        params = request.query_params.copy()
        # Blank bounds count as missing.
        if not params.get("start"):
            params["start"] = (today - timedelta(days=DEFAULT_RANGE_DAYS - 1)).isoformat()
        if not params.get("end"):
            params["end"] = today.isoformat()

        stats_filter = DailyStatsFilter(params, queryset=self.get_queryset())
        if not stats_filter.is_valid():
            raise ValidationError(stats_filter.errors)

        rows = list(stats_filter.qs)
        totals = summarize(rows)
        return Response(
            {
                "start": stats_filter.form.cleaned_data["start"],
                "end": stats_filter.form.cleaned_data["end"],
                "totals": {
                    "clicks": totals.clicks,
                    "conversions": totals.conversions,
                    "revenue_cents": totals.revenue_cents,
                },
                "epc": totals.epc,
                "cvr": totals.cvr,
                "series": self.get_serializer(rows, many=True).data,
            }
        )
