import secrets
import string

from django.conf import settings
from django.db import IntegrityError, transaction

from apps.affiliates.models import Affiliate, Link
from apps.offers.models import Offer
from core.db import dashboard_db


ALPHABET = string.ascii_letters + string.digits + "_-"
SHORT_CODE_LENGTH = 6


def generate_short_code(length: int = SHORT_CODE_LENGTH) -> str:
    return "".join(secrets.choice(ALPHABET) for _ in range(length))


def short_url(short_code: str) -> str:
    return f"{settings.PUBLIC_BASE_URL.rstrip('/')}/r/{short_code}/"


def vanity_url(affiliate_code: str, offer_slug: str) -> str:
    return f"{settings.PUBLIC_BASE_URL.rstrip('/')}/go/{affiliate_code}/{offer_slug}/"


def create_link(affiliate: Affiliate, offer: Offer, name: str | None = None) -> Link:
    db = dashboard_db()
    for _ in range(5):
        try:
            with transaction.atomic(using=db):
                link = Link.objects.using(db).create(
                    affiliate=affiliate,
                    offer=offer,
                    short_code=generate_short_code(),
                    name=name or None,
                )
            return link
        except IntegrityError:
            continue
    raise RuntimeError("Failed to generate unique short code")
