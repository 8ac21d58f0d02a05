"""
Authenticated session: platform URL, cookie jar and the transport that
carries both.

A Session is produced by login() only.  Its cookie jar is shared by every
call made with it, possibly from several threads at once, so all access goes
through a lock: request building reads a consistent copy, and the request
executor is the only writer.
"""

import threading
import urllib.parse
from collections.abc import Iterable

import requests
from requests.cookies import RequestsCookieJar, extract_cookies_to_jar

from ..config import LOGIN_PATH, _LOGIN_FAILURE_MARKERS
from ..logging_setup import log


def merge_response_cookies(jar: RequestsCookieJar, responses: Iterable[requests.Response]) -> int:
    """
    Apply the Set-Cookie headers of every response in *responses* to *jar*,
    in order.  Returns the number of cookies set.

    A cookie the server deletes (``Max-Age=0`` or an ``Expires`` in the past)
    never appears in ``resp.cookies``; replaying the raw headers into *jar*
    removes it there as well.
    """
    written = 0
    for resp in responses:
        for cookie in resp.cookies:
            jar.set_cookie(cookie)
            written += 1
        extract_cookies_to_jar(jar, resp.request, resp.raw)
    return written


def is_session_expired(
    resp: requests.Response,
    login_path: str = LOGIN_PATH,
    markers: tuple[str, ...] = _LOGIN_FAILURE_MARKERS,
) -> bool:
    """
    Return True when a 2xx answer is really the login form, i.e. the
    platform dropped the session and redirected us to log in again.

      * the final URL (after redirects) is the login page, or
      * an HTML body contains one of the login form *markers*.

    Non-HTML bodies (JSON, downloads) are never searched for markers.
    """
    final_path = urllib.parse.urlparse(resp.url).path.rstrip("/").lower()
    if final_path.endswith(login_path.rstrip("/").lower()):
        return True

    ct = resp.headers.get("Content-Type", "").split(";")[0].strip().lower()
    if ct not in ("text/html", "application/xhtml+xml"):
        return False
    return any(marker in resp.text for marker in markers)


class Session:
    """An authenticated Smartschool session."""

    def __init__(
        self,
        base_url: str,
        cookies: RequestsCookieJar,
        transport: requests.Session,
        *,
        login_path: str = LOGIN_PATH,
        login_markers: tuple[str, ...] = _LOGIN_FAILURE_MARKERS,
    ):
        self._base_url = base_url
        self._cookies = cookies
        self._lock = threading.Lock()
        self.transport = transport
        # What the login form looks like, to recognise an expired session
        self.login_path = login_path
        self.login_markers = login_markers

    @property
    def base_url(self) -> str:
        return self._base_url

    def cookie_snapshot(self) -> RequestsCookieJar:
        """Return a copy of the jar that later refreshes cannot alter."""
        with self._lock:
            return self._cookies.copy()

    def cookie_names(self) -> list[str]:
        with self._lock:
            return [c.name for c in self._cookies]

    def is_expired_response(self, resp: requests.Response) -> bool:
        return is_session_expired(resp, self.login_path, self.login_markers)

    def _absorb_cookies(self, responses: Iterable[requests.Response]) -> int:
        """
        Merge the cookies set (or deleted) by *responses* into the session
        jar, replacing any cookie with the same (domain, path, name).
        Returns the number of cookies written.
        """
        with self._lock:
            written = merge_response_cookies(self._cookies, responses)
        if written:
            log.debug("Session cookies refreshed (%d set)", written)
        return written

    def close(self) -> None:
        """Release pooled connections.  The jar is discarded with the object."""
        self.transport.close()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<Session {self._base_url} cookies={self.cookie_names()}>"
