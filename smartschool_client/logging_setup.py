"""Logging configuration for the Smartschool client.

Library modules only ever log through ``log``; handlers are attached by the
CLI via ``setup_logging``.  Applications embedding the client can configure
the ``smartschool-client`` logger themselves instead.
"""

import logging
from typing import TextIO

try:
    import colorlog
    _COLORLOG_AVAILABLE = True
except ImportError:
    _COLORLOG_AVAILABLE = False

log = logging.getLogger("smartschool-client")
log.addHandler(logging.NullHandler())

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"


def _build_handler(stream: TextIO | None) -> logging.Handler:
    if _COLORLOG_AVAILABLE:
        handler = colorlog.StreamHandler(stream)
        handler.setFormatter(colorlog.ColoredFormatter(
            "%(log_color)s" + _FORMAT.replace("%(message)s", "%(reset)s%(message)s"),
            datefmt=_DATEFMT,
            log_colors={
                "DEBUG":    "cyan",
                "INFO":     "green",
                "WARNING":  "yellow",
                "ERROR":    "red",
                "CRITICAL": "bold_red",
            },
        ))
        return handler
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
    return handler


def setup_logging(debug: bool = False, stream: TextIO | None = None) -> None:
    """
    Attach a (coloured, when colorlog is installed) stream handler.

    With ``debug`` the urllib3 connection log is enabled as well, which shows
    every request line and redirect hop of the login handshake.
    """
    log.setLevel(logging.DEBUG if debug else logging.INFO)
    log.handlers.clear()
    log.addHandler(_build_handler(stream))
    log.propagate = False

    logging.getLogger("urllib3").setLevel(logging.DEBUG if debug else logging.WARNING)
