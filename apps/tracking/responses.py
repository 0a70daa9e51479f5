from django.http import HttpResponse, JsonResponse
from django.shortcuts import redirect

from .sessions import SessionIdentity, set_session_cookie

# 1x1 transparent GIF89a.
TRANSPARENT_GIF = bytes(
    [
        71, 73, 70, 56, 57, 97, 1, 0, 1, 0, 128, 0, 0, 255, 255, 255, 0, 0, 0, 33, 249,
        4, 1, 0, 0, 1, 0, 44, 0, 0, 0, 0, 1, 0, 1, 0, 0, 2, 2, 68, 1, 0, 59,
    ]
)


def redirect_response(destination_url: str, identity: SessionIdentity) -> HttpResponse:
    response = redirect(destination_url)
    return set_session_cookie(response, identity)


def not_found_response() -> JsonResponse:
    return JsonResponse({"error": "Link not found"}, status=404)


def server_error_response(message: str) -> JsonResponse:
    return JsonResponse({"error": message}, status=500)


def pixel_response() -> HttpResponse:
    response = HttpResponse(TRANSPARENT_GIF, content_type="image/gif")
    response["Cache-Control"] = "no-store"
    return response
