import pytest
from django.test import RequestFactory

from apps.tracking.services import ClientHints, classify_device, parse_link_id, parse_revenue_cents, utm_params
from apps.tracking.sessions import resolve_session


@pytest.mark.parametrize(
    "user_agent, expected",
    [
        ("Mozilla/5.0 (iPhone; CPU iPhone OS 17_0) Mobile/15E148", "mobile"),
        ("Mozilla/5.0 (Linux; Android 14) MOBILE Safari", "mobile"),
        ("some-mObIlE-client", "mobile"),
        ("Mozilla/5.0 (Macintosh; Intel Mac OS X 14_0)", "desktop"),
        ("curl/8.4.0", "desktop"),
        ("", "desktop"),
        (None, "desktop"),
    ],
)
def test_classify_device(user_agent, expected):
    assert classify_device(user_agent) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1999", 1999),
        (" 42", 42),
        ("-5", -5),
        ("12.99", 12),
        ("12abc", 12),
        ("abc", 0),
        ("", 0),
        (None, 0),
        ("9223372036854775807", 9223372036854775807),
        ("-9223372036854775808", -9223372036854775808),
        ("9223372036854775808", 0),
        ("9999999999999999999999999", 0),
    ],
)
def test_parse_revenue_cents(raw, expected):
    assert parse_revenue_cents(raw) == expected


def test_parse_link_id():
    assert parse_link_id("0b0c2f4e-8f1d-4e57-9a43-0b6f7d3b1a55") is not None
    assert parse_link_id("nope") is None
    assert parse_link_id("") is None
    assert parse_link_id(None) is None


def test_utm_params_keeps_only_known_non_empty_fields():
    params = utm_params({"utm_source": "x", "utm_term": "", "ref": "ignored"})

    assert params == {
        "utm_source": "x",
        "utm_medium": None,
        "utm_campaign": None,
        "utm_term": None,
        "utm_content": None,
        "subid": None,
    }


def test_client_hints_from_request():
    request = RequestFactory().get(
        "/r/abc",
        HTTP_X_FORWARDED_FOR=" 2001:db8::1 , 10.0.0.1",
        HTTP_USER_AGENT="UA",
        HTTP_REFERER="https://ref.example",
    )

    hints = ClientHints.from_request(request)

    assert hints == ClientHints(ip="2001:db8::1", user_agent="UA", referer="https://ref.example")


def test_resolve_session_reuses_any_non_empty_value():
    identity = resolve_session({"af_sess": "x"})

    assert identity.session_id == "x"
    assert identity.is_new is False


def test_resolve_session_mints_unique_ids():
    first = resolve_session({})
    second = resolve_session({"af_sess": ""})

    assert first.is_new and second.is_new
    assert first.session_id != second.session_id
