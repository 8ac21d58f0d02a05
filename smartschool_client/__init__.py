"""
smartschool_client
==================
Python client for the JSON API family of a Smartschool instance.

Package structure
-----------------
smartschool_client/
├── __init__.py        – package init and public API
├── config.py          – paths, form field names, markers, envelope keys
├── errors.py          – error taxonomy
├── logging_setup.py   – "smartschool-client" logger, colorlog handler
├── network/           – requests transport factory, URL helpers
├── auth/              – login handshake, token scraping, Session
├── api/               – authenticated request executor (call, fetch_bytes)
├── mydoc/             – My Documents module (files, folders, revisions)
├── upload/            – upload staging directories
└── cli.py             – argparse CLI (``python -m smartschool_client``)

Quick start
-----------
    from smartschool_client import login, mydoc

    with login("https://myschool.smartschool.be", "username", "password") as session:
        for f in mydoc.get_recent_files(session):
            print(f.name)
"""

from . import mydoc, upload
from .api import call, fetch_bytes
from .auth import LoginMatchers, Session, login
from .errors import (
    ApiError,
    AuthError,
    DecodeError,
    InvalidBaseUrl,
    ProtocolError,
    SmartschoolError,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "AuthError",
    "DecodeError",
    "InvalidBaseUrl",
    "LoginMatchers",
    "ProtocolError",
    "Session",
    "SmartschoolError",
    "TransportError",
    "call",
    "fetch_bytes",
    "login",
    "mydoc",
    "upload",
]
