"""Login handshake: login page → token → credential POST → Session."""

import urllib.parse
from dataclasses import dataclass, field

import requests
from requests.cookies import RequestsCookieJar

from ..config import (
    LOGIN_PATH,
    PASSWORD_FIELD,
    REQUEST_TIMEOUT,
    SESSION_COOKIE,
    TOKEN_FIELD,
    USERNAME_FIELD,
    _LOGIN_FAILURE_MARKERS,
)
from ..errors import (
    AMBIGUOUS_LOGIN_RESULT,
    INVALID_CREDENTIALS,
    AuthError,
    ProtocolError,
    TransportError,
)
from ..logging_setup import log
from ..network.client import build_transport, join_url, validate_base_url
from .session import Session, merge_response_cookies
from .token import extract_login_token


@dataclass(frozen=True)
class LoginMatchers:
    """
    What the login form and its outcome look like.

    The defaults match the platform's current Symfony login page; instances
    that render a different form (or tests replaying recorded pages) can
    pass their own.
    """

    login_path: str = LOGIN_PATH
    token_field: str = TOKEN_FIELD
    username_field: str = USERNAME_FIELD
    password_field: str = PASSWORD_FIELD
    session_cookie: str = SESSION_COOKIE
    failure_markers: tuple[str, ...] = field(default=_LOGIN_FAILURE_MARKERS)


DEFAULT_MATCHERS = LoginMatchers()


def _collect_cookies(resp: requests.Response, jar: RequestsCookieJar) -> None:
    """Apply cookies set by every redirect hop and the final response to *jar*."""
    merge_response_cookies(jar, (*resp.history, resp))


def _send(transport: requests.Session, method: str, url: str, **kwargs) -> requests.Response:
    try:
        resp = transport.request(method, url, allow_redirects=True, **kwargs)
    except requests.RequestException as exc:
        raise TransportError(f"{method} {url} failed: {exc}") from exc
    if resp.status_code >= 400:
        raise TransportError(
            f"{method} {url} answered HTTP {resp.status_code}", status=resp.status_code
        )
    return resp


def classify_login_response(
    resp: requests.Response,
    jar: RequestsCookieJar,
    matchers: LoginMatchers = DEFAULT_MATCHERS,
) -> None:
    """
    Decide whether the final response of the credential POST is a logged-in
    landing page.  Returns None on success, raises otherwise.

      * login form rendered again          → AuthError(invalid_credentials)
      * left the login page + session cookie → success
      * anything else                      → ProtocolError(ambiguous_login_result)
    """
    if any(marker in resp.text for marker in matchers.failure_markers):
        raise AuthError(
            INVALID_CREDENTIALS,
            "Login failed – the platform returned the login form again. "
            "Check the username and password.",
        )

    final_path = urllib.parse.urlparse(resp.url).path.rstrip("/").lower()
    on_login_page = final_path.endswith(matchers.login_path.rstrip("/").lower())
    has_session = any(c.name == matchers.session_cookie for c in jar)

    if not on_login_page and has_session:
        return

    raise ProtocolError(
        AMBIGUOUS_LOGIN_RESULT,
        f"Could not tell whether login succeeded (final URL {resp.url}, "
        f"status {resp.status_code}, session cookie "
        f"{'present' if has_session else 'missing'})",
    )


def login(
    base_url: str,
    username: str,
    password: str,
    *,
    transport: requests.Session | None = None,
    matchers: LoginMatchers = DEFAULT_MATCHERS,
    timeout: float = REQUEST_TIMEOUT,
) -> Session:
    """
    Authenticate against a Smartschool instance and return its Session.

      GET  {base_url}/login          → hidden anti-forgery token + PHPSESSID
      POST {base_url}/login          → username / password / token (form-encoded),
                                       redirects followed
      classify the landing page      → Session, AuthError or ProtocolError

    The login is attempted exactly once; transient failures surface as
    TransportError and the caller decides whether to try again.
    """
    base_url = validate_base_url(base_url)
    if transport is not None:
        return _negotiate(base_url, username, password, transport, matchers, timeout)

    transport = build_transport()
    try:
        return _negotiate(base_url, username, password, transport, matchers, timeout)
    except Exception:
        transport.close()
        raise


def _negotiate(
    base_url: str,
    username: str,
    password: str,
    transport: requests.Session,
    matchers: LoginMatchers,
    timeout: float,
) -> Session:
    login_url = join_url(base_url, matchers.login_path)
    jar = RequestsCookieJar()

    # Step 1 – login page
    page = _send(transport, "GET", login_url, timeout=timeout)
    _collect_cookies(page, jar)
    log.debug("Cookies after GET %s: %s", login_url, [c.name for c in jar])

    # Step 2 – anti-forgery token
    token = extract_login_token(page.text, matchers.token_field)

    # Step 3 – submit credentials
    payload = {
        matchers.username_field: username,
        matchers.password_field: password,
        matchers.token_field: token,
    }
    resp = _send(transport, "POST", login_url, data=payload, cookies=jar.copy(), timeout=timeout)
    _collect_cookies(resp, jar)
    log.debug("Login POST landed on %s after %d redirect(s)", resp.url, len(resp.history))

    # Step 4 – did it work?
    classify_login_response(resp, jar, matchers)

    log.info("Logged in to %s as %s", base_url, username)
    return Session(
        base_url, jar, transport,
        login_path=matchers.login_path,
        login_markers=matchers.failure_markers,
    )
