import uuid
from dataclasses import dataclass
from typing import Mapping

from django.conf import settings
from django.http import HttpResponse


@dataclass(frozen=True)
class SessionIdentity:
    session_id: str
    is_new: bool


def resolve_session(cookies: Mapping[str, str]) -> SessionIdentity:
    # Any non-empty cookie value is reused as-is, so hand-made requests work too.
    existing = cookies.get(settings.TRACKING_COOKIE_NAME)
    if existing:
        return SessionIdentity(session_id=existing, is_new=False)
    return SessionIdentity(session_id=str(uuid.uuid4()), is_new=True)


def set_session_cookie(response: HttpResponse, identity: SessionIdentity) -> HttpResponse:
    if identity.is_new:
        response.set_cookie(
            settings.TRACKING_COOKIE_NAME,
            identity.session_id,
            max_age=settings.TRACKING_COOKIE_MAX_AGE,
            path="/",
            httponly=True,
            secure=settings.TRACKING_COOKIE_SECURE,
            samesite="Lax",
        )
    return response
