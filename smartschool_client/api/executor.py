"""
Authenticated request executor.

Every API module funnels its calls through ``call()`` (JSON endpoints) or
``fetch_bytes()`` (downloads).  A call ends in exactly one of:

    TransportError                 – the platform could not be reached
    AuthError(session_expired)     – HTTP 401/403, or redirected to the login form
    ApiError(not_found/unexpected) – any other HTTP error status
    ApiError(application_error)    – 2xx envelope reporting a failure
    DecodeError                    – 2xx body that is not the expected shape
    the decoded value

Nothing is retried.
"""

import functools
from dataclasses import dataclass
from typing import Any, TypeVar

import requests
from pydantic import TypeAdapter, ValidationError

from ..auth.session import Session
from ..config import (
    ENVELOPE_CODE_KEYS,
    ENVELOPE_DATA_KEY,
    ENVELOPE_ERROR_KEYS,
    ENVELOPE_SUCCESS_KEY,
    REQUEST_TIMEOUT,
)
from ..errors import SESSION_EXPIRED, ApiError, AuthError, DecodeError, TransportError
from ..logging_setup import log
from ..network.client import join_url

T = TypeVar("T")

METHODS = frozenset({"GET", "POST", "DELETE"})


@dataclass(frozen=True)
class EnvelopeFormat:
    """Key names of the ``{success, data | error}`` wrapper some endpoints use."""

    success_key: str = ENVELOPE_SUCCESS_KEY
    data_key: str = ENVELOPE_DATA_KEY
    error_keys: tuple[str, ...] = ENVELOPE_ERROR_KEYS
    code_keys: tuple[str, ...] = ENVELOPE_CODE_KEYS


DEFAULT_ENVELOPE = EnvelopeFormat()


@functools.lru_cache(maxsize=128)
def _adapter(expect: Any) -> TypeAdapter:
    return TypeAdapter(expect)


def _first(obj: dict, keys: tuple[str, ...]) -> Any:
    for key in keys:
        if obj.get(key) not in (None, ""):
            return obj[key]
    return None


def unwrap_envelope(
    data: Any,
    raw_body: str,
    envelope: EnvelopeFormat = DEFAULT_ENVELOPE,
    status: int = 200,
) -> Any:
    """
    Return the payload of an enveloped response, or *data* unchanged when it
    is a bare payload.

    An envelope is a JSON object whose ``success`` key holds a boolean.
    ``success: false`` raises ApiError(application_error).
    """
    if not isinstance(data, dict) or not isinstance(data.get(envelope.success_key), bool):
        return data

    if not data[envelope.success_key]:
        error = _first(data, envelope.error_keys)
        # Some endpoints nest {"code": ..., "message": ...} under "error"
        if isinstance(error, dict):
            code = _first(error, envelope.code_keys)
            message = _first(error, envelope.error_keys)
        else:
            code = _first(data, envelope.code_keys)
            message = error
        raise ApiError.application_error(
            None if code is None else str(code),
            str(message) if message is not None else "Request reported success=false",
            raw_body,
            status=status,
        )

    if envelope.data_key in data:
        return data[envelope.data_key]
    return {k: v for k, v in data.items() if k != envelope.success_key}


def _send(session: Session, method: str, path: str, timeout: float, **kwargs) -> requests.Response:
    method = method.upper()
    if method not in METHODS:
        raise ValueError(f"Unsupported HTTP method {method!r}")
    url = join_url(session.base_url, path)

    try:
        resp = session.transport.request(
            method,
            url,
            cookies=session.cookie_snapshot(),
            allow_redirects=True,
            timeout=timeout,
            **kwargs,
        )
    except requests.RequestException as exc:
        raise TransportError(f"{method} {url} failed: {exc}") from exc

    session._absorb_cookies((*resp.history, resp))
    log.debug("%s %s → HTTP %s", method, url, resp.status_code)

    status = resp.status_code
    if 200 <= status < 300:
        if session.is_expired_response(resp):
            raise AuthError(
                SESSION_EXPIRED,
                f"{method} {url} landed on the login page ({resp.url}); log in again",
                status=status,
            )
        return resp
    if status in (401, 403):
        raise AuthError(
            SESSION_EXPIRED,
            f"Session rejected by {url} (HTTP {status}); log in again",
            status=status,
        )
    if status == 404:
        raise ApiError.not_found(url, resp.text)
    raise ApiError.unexpected(url, status, resp.text)


def call(
    session: Session,
    method: str,
    path: str,
    expect: type[T] | Any = None,
    *,
    json: Any = None,
    data: Any = None,
    files: Any = None,
    params: dict | None = None,
    envelope: EnvelopeFormat = DEFAULT_ENVELOPE,
    timeout: float = REQUEST_TIMEOUT,
) -> T:
    """
    Perform an authenticated API call and decode its JSON answer into *expect*.

    Args:
        session: Session returned by login()
        method: 'GET', 'POST' or 'DELETE'
        path: Path relative to the platform URL, e.g. '/mydoc/api/v1/files/recent'
        expect: Anything pydantic's TypeAdapter accepts (``list[File]``,
            ``Folder``, ``dict`` ...).  None when the endpoint returns nothing
            useful; a non-empty body must still be JSON and its envelope is
            checked for errors.
        json / data / files / params: Forwarded to requests

    Returns:
        The validated payload, or None when *expect* is None
    """
    resp = _send(
        session, method, path, timeout,
        json=json, data=data, files=files, params=params,
    )
    raw_body = resp.text

    if not raw_body.strip():
        if expect is None:
            return None
        raise DecodeError(f"Empty response body from {resp.url}", raw_body)

    try:
        payload = resp.json()
    except ValueError as exc:
        raise DecodeError(
            f"Response from {resp.url} is not JSON", raw_body, detail=str(exc)
        ) from exc

    payload = unwrap_envelope(payload, raw_body, envelope, status=resp.status_code)
    if expect is None:
        return None

    try:
        return _adapter(expect).validate_python(payload)
    except ValidationError as exc:
        raise DecodeError(
            f"Response from {resp.url} does not match {getattr(expect, '__name__', expect)}",
            raw_body,
            detail=str(exc),
        ) from exc


def fetch_bytes(
    session: Session,
    path: str,
    *,
    method: str = "GET",
    data: Any = None,
    files: Any = None,
    params: dict | None = None,
    timeout: float = REQUEST_TIMEOUT,
) -> bytes:
    """
    Send *method* to *path* and return the raw body without decoding it
    (file downloads, and form posts whose answer is not JSON).  Status
    classification and the expired-session check still apply.
    """
    return _send(
        session, method, path, timeout, data=data, files=files, params=params,
    ).content
