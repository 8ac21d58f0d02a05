"""Authentication submodule – login handshake, token scraping, session."""

from smartschool_client.auth.login import (
    DEFAULT_MATCHERS,
    LoginMatchers,
    classify_login_response,
    login,
)
from smartschool_client.auth.session import Session, is_session_expired
from smartschool_client.auth.token import extract_login_token

__all__ = [
    "DEFAULT_MATCHERS",
    "LoginMatchers",
    "Session",
    "classify_login_response",
    "extract_login_token",
    "is_session_expired",
    "login",
]
