from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from apps.affiliates.models import Affiliate, Link
from apps.authentication.models import User
from apps.payouts.models import Payout
from apps.tracking.models import Click, Conversion

pytestmark = pytest.mark.django_db


def _click(link, session_id="s1"):
    return Click.objects.create(link=link, session_id=session_id, device="desktop")


def _conversion(link, revenue_cents, session_id="s1"):
    return Conversion.objects.create(link=link, session_id=session_id, revenue_cents=revenue_cents)


def test_dashboard_requires_authentication(api_client):
    assert api_client.get("/api/links/").status_code == 401
    assert api_client.get("/api/analytics/overview/").status_code == 401
    assert api_client.get("/api/payouts/").status_code == 401


def test_obtain_jwt_and_use_it(api_client, user, affiliate):
    response = api_client.post(
        "/api/auth/token/",
        {"email": "alice@example.com", "password": "S3cret-pass!"},
        format="json",
    )
    assert response.status_code == 200

    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.json()['access']}")
    assert client.get("/api/links/").status_code == 200


def test_affiliate_role_without_profile_gets_not_found(api_client, user):
    api_client.force_authenticate(user=user)

    assert api_client.get("/api/links/").status_code == 404


def test_admin_role_is_not_an_affiliate(api_client):
    admin = User.objects.create_user(email="ops@example.com", password="S3cret-pass!", role="admin")
    api_client.force_authenticate(user=admin)

    assert api_client.get("/api/links/").status_code == 403


def test_profile_read_and_display_name_update(auth_client, user):
    response = auth_client.get("/api/auth/me/")
    assert response.json() == {
        "id": str(user.id),
        "email": "alice@example.com",
        "display_name": "Alice",
        "role": "affiliate",
    }

    response = auth_client.patch(
        "/api/auth/me/",
        {"display_name": "Alice Doe", "email": "evil@example.com", "role": "admin"},
        format="json",
    )

    assert response.status_code == 200
    user.refresh_from_db()
    assert user.display_name == "Alice Doe"
    assert user.email == "alice@example.com"
    assert user.role == "affiliate"


def test_offers_lists_only_active_offers(auth_client, offer, inactive_offer):
    response = auth_client.get("/api/offers/")

    assert response.status_code == 200
    slugs = [row["slug"] for row in response.json()["results"]]
    assert slugs == ["shop-product"]


def test_links_list_is_scoped_and_carries_metrics(auth_client, link, offer, other_affiliate):
    foreign = Link.objects.create(affiliate=other_affiliate, offer=offer, short_code="bob001")
    _click(link)
    _click(link, "s2")
    _click(foreign)
    _conversion(link, 1500)

    response = auth_client.get("/api/links/")

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 1
    row = body["results"][0]
    assert row["short_code"] == "abc123"
    assert row["name"] == "Launch"
    assert row["offer"]["slug"] == "shop-product"
    assert row["short_url"] == "https://go.example/r/abc123/"
    assert row["vanity_url"] == "https://go.example/go/alice/shop-product/"
    assert (row["clicks"], row["conversions"], row["revenue_cents"]) == (2, 1, 1500)


def test_links_without_activity_report_zero(auth_client, link):
    row = auth_client.get("/api/links/").json()["results"][0]

    assert (row["clicks"], row["conversions"], row["revenue_cents"]) == (0, 0, 0)


def test_links_search(auth_client, link, affiliate, offer):
    Link.objects.create(affiliate=affiliate, offer=offer, short_code="zz9999", name="Autumn push")

    response = auth_client.get("/api/links/", {"search": "autumn"})

    assert [row["short_code"] for row in response.json()["results"]] == ["zz9999"]


def test_create_link_generates_short_code(auth_client, affiliate, offer):
    response = auth_client.post("/api/links/", {"offer_id": str(offer.id), "name": "Spring"}, format="json")

    assert response.status_code == 201
    body = response.json()
    assert len(body["short_code"]) == 6
    assert body["name"] == "Spring"
    assert body["clicks"] == 0
    link = Link.objects.get(short_code=body["short_code"])
    assert link.affiliate == affiliate
    assert link.offer == offer


def test_create_link_for_inactive_offer_is_rejected(auth_client, inactive_offer):
    response = auth_client.post("/api/links/", {"offer_id": str(inactive_offer.id)}, format="json")

    assert response.status_code == 400
    assert "offer_id" in response.json()
    assert not Link.objects.exists()


def test_links_of_other_affiliates_are_hidden(auth_client, offer, other_affiliate):
    foreign = Link.objects.create(affiliate=other_affiliate, offer=offer, short_code="bob001")

    assert auth_client.get(f"/api/links/{foreign.id}/").status_code == 404


def test_overview_totals_epc_and_cvr(auth_client, link, offer, other_affiliate):
    for session in ("s1", "s2", "s3", "s4"):
        _click(link, session)
    _conversion(link, 1000)
    _conversion(link, 600)
    foreign = Link.objects.create(affiliate=other_affiliate, offer=offer, short_code="bob001")
    _click(foreign)
    _conversion(foreign, 99999)

    response = auth_client.get("/api/analytics/overview/")

    assert response.status_code == 200
    body = response.json()
    today = timezone.localdate()
    assert body["start"] == (today - timedelta(days=29)).isoformat()
    assert body["end"] == today.isoformat()
    assert body["totals"] == {"clicks": 4, "conversions": 2, "revenue_cents": 1600}
    assert body["epc"] == pytest.approx(4.0)
    assert body["cvr"] == pytest.approx(0.5)
    assert body["series"] == [
        {"day": today.isoformat(), "clicks": 4, "conversions": 2, "revenue_cents": 1600},
    ]


def test_overview_range_outside_activity_is_empty(auth_client, link):
    _click(link)
    yesterday = timezone.localdate() - timedelta(days=1)

    response = auth_client.get(
        "/api/analytics/overview/",
        {"start": (yesterday - timedelta(days=6)).isoformat(), "end": yesterday.isoformat()},
    )

    body = response.json()
    assert body["series"] == []
    assert body["totals"] == {"clicks": 0, "conversions": 0, "revenue_cents": 0}
    assert body["epc"] == 0
    assert body["cvr"] == 0


def test_overview_rejects_malformed_dates(auth_client, affiliate):
    response = auth_client.get("/api/analytics/overview/", {"start": "last-week"})

    assert response.status_code == 400
    assert "start" in response.json()


def test_overview_blank_bounds_fall_back_to_default_range(auth_client, link):
    _click(link)
    today = timezone.localdate()

    response = auth_client.get("/api/analytics/overview/", {"start": "", "end": ""})

    assert response.status_code == 200
    body = response.json()
    assert body["start"] == (today - timedelta(days=29)).isoformat()
    assert body["end"] == today.isoformat()
    assert body["totals"]["clicks"] == 1


def test_payouts_are_scoped_and_newest_first(auth_client, affiliate, other_affiliate):
    today = timezone.localdate()
    older = Payout.objects.create(
        affiliate=affiliate,
        period_start=today.replace(day=1) - timedelta(days=62),
        period_end=today.replace(day=1) - timedelta(days=32),
        revenue_cents=1000,
        commission_cents=100,
        status="paid",
    )
    newer = Payout.objects.create(
        affiliate=affiliate,
        period_start=today.replace(day=1) - timedelta(days=31),
        period_end=today.replace(day=1) - timedelta(days=1),
        revenue_cents=2000,
        commission_cents=200,
    )
    Payout.objects.create(
        affiliate=other_affiliate,
        period_start=newer.period_start,
        period_end=newer.period_end,
    )

    response = auth_client.get("/api/payouts/")

    assert response.status_code == 200
    rows = response.json()["results"]
    assert [row["id"] for row in rows] == [str(newer.id), str(older.id)]
    assert rows[1]["status"] == "paid"
    assert rows[0]["commission_cents"] == 200
