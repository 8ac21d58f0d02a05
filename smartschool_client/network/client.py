"""
HTTP transport configuration for Smartschool communication.

The transport is a plain requests.Session that never stores cookies itself:
cookies belong to the authenticated Session object and are attached to every
request explicitly (see smartschool_client.auth.session).
"""

import http.cookiejar
import urllib.parse

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..errors import InvalidBaseUrl


class _RejectAllCookiesPolicy(http.cookiejar.DefaultCookiePolicy):
    """Cookie policy that refuses to store anything in the transport's jar."""

    def set_ok(self, cookie, request):
        return False


def build_transport(verify_ssl: bool = True, pool_size: int = 10) -> requests.Session:
    """
    Return a requests.Session suitable as the transport of a Smartschool session.

    Args:
        verify_ssl: Whether to verify TLS certificates
        pool_size: Connections kept per host, i.e. how many calls can be in
            flight concurrently against one Session without blocking

    Returns:
        Configured requests.Session instance
    """
    transport = requests.Session()
    # No retries: every failure is surfaced to the caller exactly once.
    adapter = HTTPAdapter(
        max_retries=Retry(total=0, read=False),
        pool_connections=pool_size,
        pool_maxsize=pool_size,
    )
    transport.mount("http://", adapter)
    transport.mount("https://", adapter)
    transport.verify = verify_ssl
    transport.cookies.set_policy(_RejectAllCookiesPolicy())
    transport.headers.update({
        "User-Agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        ),
        "Accept-Language": "en",
        "Connection": "keep-alive",
    })
    return transport


def validate_base_url(url: str) -> str:
    """
    Check that *url* is an absolute http(s) URL and return it without a
    trailing slash (e.g. 'https://myschool.smartschool.be').
    """
    parsed = urllib.parse.urlparse(url.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidBaseUrl(f"Not an absolute http(s) URL: {url!r}")
    if parsed.query or parsed.fragment:
        raise InvalidBaseUrl(f"Platform URL must not carry a query or fragment: {url!r}")
    return urllib.parse.urlunparse(
        (parsed.scheme, parsed.netloc, parsed.path.rstrip("/"), "", "", "")
    )


def join_url(base: str, path: str) -> str:
    """
    Append a platform-relative *path* to *base*.

    Unlike urllib.parse.urljoin this keeps any path prefix of *base*
    (instances hosted under a sub-path) and refuses absolute URLs, so a
    request can never leave the platform the session was created for.
    """
    if urllib.parse.urlparse(path).scheme:
        raise ValueError(f"Expected a path relative to the platform, got {path!r}")
    return base + "/" + path.lstrip("/")
