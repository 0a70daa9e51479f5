from __future__ import annotations

import logging
import uuid
from datetime import date, datetime, time, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal

from django.db import transaction

from apps.tracking.models import Conversion
from core.db import tracking_db

from .models import Payout

logger = logging.getLogger(__name__)


def previous_month(today: date) -> tuple[date, date]:
    last_day = today.replace(day=1) - timedelta(days=1)
    return last_day.replace(day=1), last_day


def commission_for(revenue_cents: int, commission_rate: Decimal) -> int:
    amount = Decimal(revenue_cents) * Decimal(commission_rate) / Decimal("100")
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def build_payouts(period_start: date, period_end: date) -> list[Payout]:
    """
    Roll conversions created between period_start and period_end (inclusive,
    UTC days) into one pending payout per affiliate. Affiliates that already
    have a payout for the period are skipped, so reruns are harmless.
    """
    db = tracking_db()
    window_start = datetime.combine(period_start, time.min, tzinfo=timezone.utc)
    window_end = datetime.combine(period_end + timedelta(days=1), time.min, tzinfo=timezone.utc)

    conversions = Conversion.objects.using(db).filter(
        created_at__gte=window_start,
        created_at__lt=window_end,
    ).values_list("link__affiliate_id", "revenue_cents", "link__offer__commission_rate")

    totals: dict[uuid.UUID, list[int]] = {}
    for affiliate_id, revenue_cents, commission_rate in conversions.iterator():
        entry = totals.setdefault(affiliate_id, [0, 0])
        entry[0] += revenue_cents
        entry[1] += commission_for(revenue_cents, commission_rate)

    existing = set(
        Payout.objects.using(db)
        .filter(period_start=period_start, period_end=period_end)
        .values_list("affiliate_id", flat=True)
    )

    created: list[Payout] = []
    with transaction.atomic(using=db):
        for affiliate_id, (revenue_cents, commission_cents) in totals.items():
            if affiliate_id in existing:
                continue
            created.append(
                Payout.objects.using(db).create(
                    affiliate_id=affiliate_id,
                    period_start=period_start,
                    period_end=period_end,
                    revenue_cents=revenue_cents,
                    commission_cents=commission_cents,
                )
            )

    logger.info(
        "Built %d payouts for %s..%s (%d already existed)",
        len(created),
        period_start,
        period_end,
        len(existing),
    )
    return created
