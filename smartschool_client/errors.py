"""
Error taxonomy shared by the login handshake, the request executor and the
module adapters.

Every failure is raised to the immediate caller.  Callers can branch on the
exception class and, where a class covers several situations, on its
``reason`` attribute (see the ``*_REASON`` constants below).
"""

from .config import ERROR_BODY_PREVIEW

# ProtocolError reasons
MISSING_LOGIN_TOKEN = "missing_login_token"
AMBIGUOUS_LOGIN_RESULT = "ambiguous_login_result"

# AuthError reasons
INVALID_CREDENTIALS = "invalid_credentials"
SESSION_EXPIRED = "session_expired"

# ApiError reasons
NOT_FOUND = "not_found"
APPLICATION_ERROR = "application_error"
UNEXPECTED = "unexpected"


def _preview(body: str | None) -> str:
    if not body:
        return ""
    body = body.strip()
    if len(body) > ERROR_BODY_PREVIEW:
        return body[:ERROR_BODY_PREVIEW] + "…"
    return body


class SmartschoolError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidBaseUrl(SmartschoolError, ValueError):
    """The platform URL handed to login() is not an absolute http(s) URL."""


class TransportError(SmartschoolError):
    """
    The platform could not be reached (DNS, TCP, TLS, timeout) or the login
    page answered with an HTTP error status.
    """

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class ProtocolError(SmartschoolError):
    """The login page or login response no longer looks like we expect."""

    def __init__(self, reason: str, message: str):
        super().__init__(message)
        self.reason = reason


class AuthError(SmartschoolError):
    """Bad credentials at login time, or a session the server no longer accepts."""

    def __init__(self, reason: str, message: str, status: int | None = None):
        super().__init__(message)
        self.reason = reason
        self.status = status


class ApiError(SmartschoolError):
    """The server was reached and authenticated us, but the call failed."""

    def __init__(
        self,
        reason: str,
        message: str,
        *,
        status: int | None = None,
        body: str | None = None,
        code: str | None = None,
    ):
        super().__init__(message)
        self.reason = reason
        self.status = status
        self.body = body
        self.code = code

    @classmethod
    def not_found(cls, url: str, body: str) -> "ApiError":
        return cls(NOT_FOUND, f"Not found: {url}", status=404, body=body)

    @classmethod
    def unexpected(cls, url: str, status: int, body: str) -> "ApiError":
        return cls(
            UNEXPECTED,
            f"HTTP {status} from {url}: {_preview(body)}",
            status=status,
            body=body,
        )

    @classmethod
    def application_error(
        cls, code: str | None, message: str, body: str, status: int = 200
    ) -> "ApiError":
        return cls(APPLICATION_ERROR, message, code=code, body=body, status=status)


class DecodeError(SmartschoolError):
    """
    A 2xx response whose body is not JSON, or whose JSON does not match the
    shape the caller asked for.  ``raw_body`` always holds the body verbatim.
    """

    def __init__(self, message: str, raw_body: str, detail: str | None = None):
        super().__init__(message)
        self.raw_body = raw_body
        self.detail = detail
