from __future__ import annotations

from flask import Response

from taskdesk.application.services.session_cookies import (
    COOKIE_NAME,
    DEFAULT_MAX_AGE,
    SessionCookieCodec,
)


def test_encode_sets_session_attributes() -> None:
    cookie = SessionCookieCodec(secure=False).encode("tok")

    assert cookie.name == COOKIE_NAME == "auth_token"
    assert cookie.value == "tok"
    assert cookie.max_age == DEFAULT_MAX_AGE == 604800
    assert cookie.httponly is True
    assert cookie.samesite == "Lax"
    assert cookie.path == "/"
    assert cookie.secure is False


def test_apply_writes_set_cookie_header() -> None:
    response = Response()
    SessionCookieCodec(secure=True).encode("tok").apply(response)

    header = response.headers["Set-Cookie"]
    assert header.startswith("auth_token=tok;")
    assert "Max-Age=604800" in header
    assert "HttpOnly" in header
    assert "Secure" in header
    assert "Path=/" in header
    assert "SameSite=Lax" in header


def test_clear_expires_cookie_immediately() -> None:
    codec = SessionCookieCodec(secure=False)
    cookie = codec.clear()
    response = Response()
    cookie.apply(response)

    header = response.headers["Set-Cookie"]
    assert cookie.expired
    assert header.startswith("auth_token=;")
    assert "Max-Age=0" in header
    assert "Expires=Thu, 01 Jan 1970 00:00:00 GMT" in header
    assert "Secure" not in header


def test_extract_reads_raw_token() -> None:
    codec = SessionCookieCodec(secure=False)

    assert codec.extract({"auth_token": "tok"}) == "tok"
    assert codec.extract({"auth_token": ""}) is None
    assert codec.extract({"other": "tok"}) is None
