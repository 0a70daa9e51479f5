import django_filters

from .models import AffiliateDailyStats


class DailyStatsFilter(django_filters.FilterSet):
    start = django_filters.DateFilter(field_name="day", lookup_expr="gte")
    end = django_filters.DateFilter(field_name="day", lookup_expr="lte")

    class Meta:
        model = AffiliateDailyStats
        fields = ["start", "end"]
