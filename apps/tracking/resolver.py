import logging
import uuid
from dataclasses import dataclass

from apps.affiliates.models import Link
from core.db import tracking_db

from .exceptions import LinkNotFound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedLink:
    link_id: uuid.UUID
    destination_url: str


def _resolve(**lookup: str) -> ResolvedLink:
    # One query: the link, its offer's destination and the active check together.
    row = (
        Link.objects.using(tracking_db())
        .filter(offer__active=True, **lookup)
        .order_by("created_at")
        .values_list("id", "offer__destination_url")
        .first()
    )
    if row is None:
        logger.info("No active link for %s", lookup)
        raise LinkNotFound()
    link_id, destination_url = row
    return ResolvedLink(link_id=link_id, destination_url=destination_url)


def resolve_short_code(code: str) -> ResolvedLink:
    return _resolve(short_code=code)


def resolve_vanity(affiliate_code: str, offer_slug: str) -> ResolvedLink:
    """
    Resolve an affiliate code + offer slug pair. When the affiliate holds
    several links for the offer, the oldest one wins.
    """
    return _resolve(affiliate__code=affiliate_code, offer__slug=offer_slug)
