from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from apps.affiliates.models import Affiliate, Link
from apps.authentication.models import User
from apps.offers.models import Offer


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user(db):
    return User.objects.create_user(
        email="alice@example.com",
        password="S3cret-pass!",
        display_name="Alice",
    )


@pytest.fixture
def affiliate(user):
    return Affiliate.objects.create(code="alice", user=user)


@pytest.fixture
def other_affiliate(db):
    other = User.objects.create_user(email="bob@example.com", password="S3cret-pass!")
    return Affiliate.objects.create(code="bob", user=other)


@pytest.fixture
def offer(db):
    return Offer.objects.create(
        name="Shop Product",
        slug="shop-product",
        destination_url="https://shop.example/product",
        commission_rate=Decimal("10"),
    )


@pytest.fixture
def inactive_offer(db):
    return Offer.objects.create(
        name="Retired Campaign",
        slug="retired",
        destination_url="https://shop.example/retired",
        active=False,
    )


@pytest.fixture
def link(affiliate, offer):
    return Link.objects.create(affiliate=affiliate, offer=offer, short_code="abc123", name="Launch")


@pytest.fixture
def auth_client(api_client, user, affiliate):
    api_client.force_authenticate(user=user)
    return api_client
