from datetime import date, datetime, time, timezone
from decimal import Decimal

import pytest
from django.utils import timezone as dj_timezone

from apps.affiliates.models import Link
from apps.offers.models import Offer
from apps.payouts.models import Payout
from apps.payouts.services import build_payouts, commission_for, previous_month
from apps.payouts.tasks import build_monthly_payouts
from apps.tracking.models import Conversion


def _conversion_on(link, day, revenue_cents):
    conversion = Conversion.objects.create(link=link, session_id="s1", revenue_cents=revenue_cents)
    Conversion.objects.filter(pk=conversion.pk).update(
        created_at=datetime.combine(day, time(12, 0), tzinfo=timezone.utc)
    )
    return conversion


@pytest.mark.parametrize(
    "today, expected",
    [
        (date(2026, 3, 15), (date(2026, 2, 1), date(2026, 2, 28))),
        (date(2026, 1, 1), (date(2025, 12, 1), date(2025, 12, 31))),
        (date(2024, 3, 31), (date(2024, 2, 1), date(2024, 2, 29))),
    ],
)
def test_previous_month(today, expected):
    assert previous_month(today) == expected


def test_commission_rounds_half_up():
    assert commission_for(1999, Decimal("12.5")) == 250
    assert commission_for(1000, Decimal("10")) == 100
    assert commission_for(5, Decimal("10")) == 1
    assert commission_for(4, Decimal("10")) == 0


@pytest.mark.django_db
def test_build_payouts_groups_by_affiliate_within_period(link, offer, affiliate, other_affiliate):
    premium = Offer.objects.create(
        name="Premium",
        slug="premium",
        destination_url="https://shop.example/premium",
        commission_rate=Decimal("20"),
    )
    premium_link = Link.objects.create(affiliate=affiliate, offer=premium, short_code="prem01")
    foreign = Link.objects.create(affiliate=other_affiliate, offer=offer, short_code="bob001")

    _conversion_on(link, date(2026, 2, 1), 1000)
    _conversion_on(premium_link, date(2026, 2, 28), 500)
    _conversion_on(foreign, date(2026, 2, 10), 3000)
    _conversion_on(link, date(2026, 3, 1), 7777)

    created = build_payouts(date(2026, 2, 1), date(2026, 2, 28))

    assert len(created) == 2
    mine = Payout.objects.get(affiliate=affiliate)
    assert (mine.revenue_cents, mine.commission_cents) == (1500, 200)
    assert mine.status == "pending"
    theirs = Payout.objects.get(affiliate=other_affiliate)
    assert (theirs.revenue_cents, theirs.commission_cents) == (3000, 300)


@pytest.mark.django_db
def test_build_payouts_leaves_existing_rows_alone(link, affiliate):
    _conversion_on(link, date(2026, 2, 3), 1000)
    Payout.objects.create(
        affiliate=affiliate,
        period_start=date(2026, 2, 1),
        period_end=date(2026, 2, 28),
        revenue_cents=1,
        commission_cents=1,
        status="paid",
    )

    assert build_payouts(date(2026, 2, 1), date(2026, 2, 28)) == []
    assert Payout.objects.get().revenue_cents == 1


@pytest.mark.django_db
def test_monthly_task_builds_previous_month(link, affiliate):
    period_start, period_end = previous_month(dj_timezone.localdate())
    _conversion_on(link, period_start, 2000)

    assert build_monthly_payouts.delay().get() == 1
    payout = Payout.objects.get()
    assert (payout.period_start, payout.period_end) == (period_start, period_end)
    assert payout.commission_cents == 200
