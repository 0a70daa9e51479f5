import logging

from django.http import HttpRequest, HttpResponse
from django.views.decorators.http import require_GET
from rest_framework import permissions, status, views
from rest_framework.exceptions import ParseError, UnsupportedMediaType
from rest_framework.request import Request
from rest_framework.response import Response

from .exceptions import LinkNotFound, StorageError
from .resolver import ResolvedLink, resolve_short_code, resolve_vanity
from .responses import not_found_response, pixel_response, redirect_response, server_error_response
from .serializers import ConversionReportSerializer
from .services import (
    ClientHints,
    parse_link_id,
    parse_revenue_cents,
    record_click,
    record_conversion,
    utm_params,
)
from .sessions import resolve_session

logger = logging.getLogger(__name__)


def track_and_redirect(request: HttpRequest, link: ResolvedLink) -> HttpResponse:
    """
    Shared tail of both redirect routes: pick the visitor session, record the
    click, then redirect. No redirect is issued if the click cannot be stored.
    """
    identity = resolve_session(request.COOKIES)
    try:
        record_click(
            link_id=link.link_id,
            session_id=identity.session_id,
            hints=ClientHints.from_request(request),
            utm=utm_params(request.GET),
        )
    except StorageError:
        return server_error_response("Failed to record click")
    return redirect_response(link.destination_url, identity)


@require_GET
def redirect_short_link(request: HttpRequest, code: str) -> HttpResponse:
    try:
        link = resolve_short_code(code)
    except LinkNotFound:
        return not_found_response()
    return track_and_redirect(request, link)


@require_GET
def redirect_vanity(request: HttpRequest, affiliate_code: str, offer_slug: str) -> HttpResponse:
    try:
        link = resolve_vanity(affiliate_code, offer_slug)
    except LinkNotFound:
        return not_found_response()
    return track_and_redirect(request, link)


@require_GET
def tracking_pixel(request: HttpRequest) -> HttpResponse:
    """
    Conversion pixel for "thank you" pages. Always answers with the GIF:
    missing ids skip recording and storage failures are only logged.
    """
    link_id = parse_link_id(request.GET.get("link_id"))
    session_id = request.GET.get("sid")
    if link_id and session_id:
        try:
            record_conversion(
                link_id=link_id,
                session_id=session_id,
                revenue_cents=parse_revenue_cents(request.GET.get("rev")),
                currency=request.GET.get("cur"),
                external_order_id=request.GET.get("oid"),
            )
        except StorageError:
            # Already logged; the pixel still renders.
            pass
    else:
        logger.info("Pixel hit without link_id/sid; nothing recorded")
    return pixel_response()


class ConversionReportView(views.APIView):
    """
    Server-to-server conversion report. Unlike the pixel, missing or malformed
    fields are rejected so the caller can correct them.
    """

    authentication_classes: list = []
    permission_classes = [permissions.AllowAny]
    throttle_classes: list = []

    def post(self, request: Request, *args, **kwargs) -> Response:
        try:
            payload = request.data
        except (ParseError, UnsupportedMediaType):
            payload = {}

        serializer = ConversionReportSerializer(data=payload)
        serializer.is_valid(raise_exception=True)

        try:
            record_conversion(**serializer.validated_data)
        except StorageError:
            return Response(
                {"error": "Failed to record conversion"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response({"ok": True}, status=status.HTTP_200_OK)
