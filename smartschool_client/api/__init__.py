"""Authenticated request executor shared by all API modules."""

from smartschool_client.api.executor import (
    DEFAULT_ENVELOPE,
    EnvelopeFormat,
    call,
    fetch_bytes,
    unwrap_envelope,
)

__all__ = [
    "DEFAULT_ENVELOPE",
    "EnvelopeFormat",
    "call",
    "fetch_bytes",
    "unwrap_envelope",
]
