"""
Tests for the Session value holder and the transport factory.
"""

import http.client
import unittest
from http.cookiejar import Cookie
from types import SimpleNamespace
from unittest.mock import MagicMock

import requests
from requests.cookies import RequestsCookieJar, create_cookie, extract_cookies_to_jar

from smartschool_client.auth.session import Session, is_session_expired
from smartschool_client.errors import InvalidBaseUrl
from smartschool_client.network.client import build_transport, join_url, validate_base_url

BASE = "https://myschool.smartschool.be"


def _jar(**cookies) -> RequestsCookieJar:
    jar = RequestsCookieJar()
    for name, value in cookies.items():
        jar.set(name, value, domain="myschool.smartschool.be", path="/")
    return jar


def _response(url=BASE + "/mydoc/api/v1/files/recent", set_cookie=(), content_type=None, body=""):
    """A requests.Response whose Set-Cookie headers look as if read off the wire."""
    resp = requests.Response()
    resp.status_code = 200
    resp.url = url
    resp._content = body.encode("utf-8")
    resp.encoding = "utf-8"
    if content_type:
        resp.headers["Content-Type"] = content_type
    resp.request = requests.Request("GET", url).prepare()
    msg = http.client.HTTPMessage()
    for header in set_cookie:
        msg["Set-Cookie"] = header
    resp.raw = SimpleNamespace(_original_response=SimpleNamespace(msg=msg))
    extract_cookies_to_jar(resp.cookies, resp.request, resp.raw)
    return resp


class TestSession(unittest.TestCase):
    def test_base_url_is_read_only(self):
        session = Session(BASE, _jar(PHPSESSID="a"), MagicMock())
        with self.assertRaises(AttributeError):
            session.base_url = "https://elsewhere.smartschool.be"

    def test_snapshot_is_independent_copy(self):
        session = Session(BASE, _jar(PHPSESSID="a"), MagicMock())
        snapshot = session.cookie_snapshot()
        snapshot.set("PHPSESSID", "tampered", domain="myschool.smartschool.be", path="/")
        self.assertEqual(session.cookie_snapshot().get("PHPSESSID"), "a")

    def test_absorb_replaces_same_cookie(self):
        session = Session(BASE, _jar(PHPSESSID="a"), MagicMock())
        written = session._absorb_cookies([_response(set_cookie=["PHPSESSID=b; Path=/", "other=c; Path=/"])])
        self.assertEqual(written, 2)
        self.assertEqual(session.cookie_snapshot().get("PHPSESSID"), "b")
        self.assertEqual(sorted(session.cookie_names()), ["PHPSESSID", "other"])

    def test_absorb_nothing(self):
        session = Session(BASE, _jar(PHPSESSID="a"), MagicMock())
        self.assertEqual(session._absorb_cookies([_response()]), 0)
        self.assertEqual(session.cookie_names(), ["PHPSESSID"])

    def test_absorb_applies_max_age_zero_deletion(self):
        session = Session(BASE, _jar(PHPSESSID="a", extra="1"), MagicMock())
        session._absorb_cookies([_response(set_cookie=["extra=; Path=/; Max-Age=0"])])
        self.assertEqual(session.cookie_names(), ["PHPSESSID"])

    def test_absorb_applies_past_expires_deletion(self):
        session = Session(BASE, _jar(PHPSESSID="a", extra="1"), MagicMock())
        header = "extra=deleted; Path=/; Expires=Thu, 01 Jan 1970 00:00:01 GMT"
        session._absorb_cookies([_response(set_cookie=[header])])
        self.assertNotIn("extra", session.cookie_names())

    def test_later_hop_wins(self):
        session = Session(BASE, _jar(), MagicMock())
        session._absorb_cookies([
            _response(set_cookie=["PHPSESSID=first; Path=/"]),
            _response(set_cookie=["PHPSESSID=second; Path=/"]),
        ])
        self.assertEqual(session.cookie_snapshot().get("PHPSESSID"), "second")

    def test_context_manager_closes_transport(self):
        transport = MagicMock()
        with Session(BASE, _jar(), transport) as session:
            self.assertIsInstance(session, Session)
        transport.close.assert_called_once()

    def test_sessions_compare_by_identity(self):
        a = Session(BASE, _jar(PHPSESSID="a"), MagicMock())
        b = Session(BASE, _jar(PHPSESSID="a"), MagicMock())
        self.assertNotEqual(a, b)
        self.assertEqual(a, a)


class TestIsSessionExpired(unittest.TestCase):
    def test_redirected_to_login_page(self):
        self.assertTrue(is_session_expired(_response(url=BASE + "/login")))

    def test_login_page_under_sub_path(self):
        self.assertTrue(is_session_expired(_response(url="http://h/school/login/")))

    def test_html_login_form_body(self):
        resp = _response(content_type="text/html; charset=UTF-8",
                         body='<form><input name="login_form[_password]"></form>')
        self.assertTrue(is_session_expired(resp))

    def test_json_body_is_never_searched(self):
        resp = _response(content_type="application/json",
                         body='{"name": "name=\\"login_form[_password]\\""}')
        self.assertFalse(is_session_expired(resp))

    def test_api_response(self):
        self.assertFalse(is_session_expired(_response(content_type="application/json", body="[]")))

    def test_custom_login_path(self):
        session = Session(BASE, _jar(), MagicMock(), login_path="/aanmelden")
        self.assertTrue(session.is_expired_response(_response(url=BASE + "/aanmelden")))
        self.assertFalse(session.is_expired_response(_response(url=BASE + "/login")))


class TestBuildTransport(unittest.TestCase):
    def test_transport_has_keep_alive(self):
        transport = build_transport()
        self.assertEqual(transport.headers["Connection"], "keep-alive")

    def test_transport_has_user_agent(self):
        transport = build_transport()
        self.assertIn("Mozilla", transport.headers["User-Agent"])

    def test_transport_never_retries(self):
        adapter = build_transport().get_adapter(BASE)
        self.assertEqual(adapter.max_retries.total, 0)

    def test_verify_ssl_flag(self):
        self.assertFalse(build_transport(verify_ssl=False).verify)

    def test_transport_jar_refuses_cookies(self):
        transport = build_transport()
        cookie: Cookie = create_cookie("PHPSESSID", "x", domain="myschool.smartschool.be")
        self.assertFalse(transport.cookies.get_policy().set_ok(cookie, MagicMock()))


class TestUrlHelpers(unittest.TestCase):
    def test_trailing_slash_removed(self):
        self.assertEqual(validate_base_url(BASE + "/"), BASE)

    def test_sub_path_kept(self):
        self.assertEqual(validate_base_url("http://localhost:8080/school/"),
                         "http://localhost:8080/school")

    def test_rejects_non_http(self):
        for url in ("ftp://myschool.smartschool.be", "myschool.smartschool.be", ""):
            with self.subTest(url=url):
                with self.assertRaises(InvalidBaseUrl):
                    validate_base_url(url)

    def test_rejects_query(self):
        with self.assertRaises(InvalidBaseUrl):
            validate_base_url(BASE + "/?module=Messages")

    def test_invalid_base_url_is_value_error(self):
        with self.assertRaises(ValueError):
            validate_base_url("nope")

    def test_join_url(self):
        self.assertEqual(join_url(BASE, "/login"), BASE + "/login")
        self.assertEqual(join_url(BASE, "login"), BASE + "/login")
        self.assertEqual(join_url("http://h/school", "/login"), "http://h/school/login")

    def test_join_url_rejects_absolute(self):
        with self.assertRaises(ValueError):
            join_url(BASE, "https://elsewhere/login")


if __name__ == "__main__":
    unittest.main()
