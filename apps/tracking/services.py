from __future__ import annotations

import logging
import re
import uuid
from dataclasses import dataclass
from typing import Any, Mapping

from django.core.exceptions import ValidationError
from django.core.validators import validate_ipv46_address
from django.db import DatabaseError
from django.http import HttpRequest

from core.db import tracking_db

from .exceptions import StorageError
from .models import Click, Conversion

logger = logging.getLogger(__name__)

UTM_FIELDS = ("utm_source", "utm_medium", "utm_campaign", "utm_term", "utm_content", "subid")
DEFAULT_CURRENCY = "USD"

# revenue_cents is a signed 64-bit column.
REVENUE_CENTS_MIN = -(2**63)
REVENUE_CENTS_MAX = 2**63 - 1

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class ClientHints:
    ip: str | None
    user_agent: str
    referer: str

    @classmethod
    def from_request(cls, request: HttpRequest) -> ClientHints:
        forwarded = request.META.get("HTTP_X_FORWARDED_FOR", "")
        ip = forwarded.split(",")[0].strip() or request.META.get("REMOTE_ADDR", "")
        try:
            validate_ipv46_address(ip)
        except ValidationError:
            ip = None
        return cls(
            ip=ip,
            user_agent=request.META.get("HTTP_USER_AGENT", ""),
            referer=request.META.get("HTTP_REFERER", ""),
        )


def classify_device(user_agent: str | None) -> str:
    if user_agent and "mobile" in user_agent.lower():
        return "mobile"
    return "desktop"


def utm_params(query: Mapping[str, str]) -> dict[str, str | None]:
    return {field: query.get(field) or None for field in UTM_FIELDS}


def parse_revenue_cents(value: str | None) -> int:
    """
    Read an integer amount from a query-string value. Only the leading digits
    count ("12abc" is 12). Anything without them, or outside the column's
    range, is 0.
    """
    match = _LEADING_INT.match(value or "")
    if not match:
        return 0
    amount = int(match.group(1))
    if not REVENUE_CENTS_MIN <= amount <= REVENUE_CENTS_MAX:
        return 0
    return amount


def parse_link_id(value: str | None) -> uuid.UUID | None:
    try:
        return uuid.UUID(value) if value else None
    except ValueError:
        return None


def record_click(
    link_id: uuid.UUID,
    session_id: str,
    hints: ClientHints,
    utm: Mapping[str, str | None],
) -> Click:
    """
    Insert one click row. Every redirect produces a new row; repeated clicks
    within a session are not collapsed.
    """
    try:
        return Click.objects.using(tracking_db()).create(
            link_id=link_id,
            session_id=session_id,
            ip=hints.ip,
            user_agent=hints.user_agent,
            referer=hints.referer,
            device=classify_device(hints.user_agent),
            **{field: utm.get(field) for field in UTM_FIELDS},
        )
    except DatabaseError as exc:
        logger.exception("Failed to record click for link %s", link_id)
        raise StorageError("Failed to record click") from exc


def record_conversion(
    link_id: uuid.UUID,
    session_id: str,
    revenue_cents: int = 0,
    currency: str | None = None,
    external_order_id: str | None = None,
    meta: Any = None,
) -> Conversion:
    """
    Insert one conversion row. Reports sharing an external order id are not
    de-duplicated.
    """
    try:
        return Conversion.objects.using(tracking_db()).create(
            link_id=link_id,
            session_id=session_id,
            revenue_cents=revenue_cents,
            currency=currency or DEFAULT_CURRENCY,
            external_order_id=external_order_id or None,
            meta=meta,
        )
    except DatabaseError as exc:
        logger.exception("Failed to record conversion for link %s", link_id)
        raise StorageError("Failed to record conversion") from exc
