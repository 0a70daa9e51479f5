from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Dict, Iterable

from apps.affiliates.models import Affiliate
from core.db import dashboard_db

from .models import AffiliateDailyStats, AffiliateLinkTotals


def earnings_per_click(revenue_cents: int, clicks: int) -> float:
    """Revenue in major currency units per click; 0 when there are no clicks."""
    if not clicks:
        return 0.0
    return revenue_cents / 100 / clicks


def conversion_rate(conversions: int, clicks: int) -> float:
    if not clicks:
        return 0.0
    return conversions / clicks


@dataclass
class StatsTotals:
    clicks: int = 0
    conversions: int = 0
    revenue_cents: int = 0

    @property
    def epc(self) -> float:
        return earnings_per_click(self.revenue_cents, self.clicks)

    @property
    def cvr(self) -> float:
        return conversion_rate(self.conversions, self.clicks)


def summarize(rows: Iterable[AffiliateDailyStats]) -> StatsTotals:
    totals = StatsTotals()
    for row in rows:
        totals.clicks += row.clicks or 0
        totals.conversions += row.conversions or 0
        totals.revenue_cents += row.revenue_cents or 0
    return totals


def link_totals(affiliate: Affiliate) -> Dict[uuid.UUID, AffiliateLinkTotals]:
    rows = AffiliateLinkTotals.objects.using(dashboard_db()).filter(affiliate_id=affiliate.id)
    return {row.link_id: row for row in rows}


def daily_stats(affiliate: Affiliate):
    return AffiliateDailyStats.objects.using(dashboard_db()).filter(affiliate_id=affiliate.id).order_by("day")
