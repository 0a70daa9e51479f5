from celery import shared_task
from django.utils import timezone

from .services import build_payouts, previous_month


@shared_task
def build_monthly_payouts() -> int:
    period_start, period_end = previous_month(timezone.localdate())
    return len(build_payouts(period_start, period_end))
