"""
Platform-wide file uploads.

Uploading is a two-step affair: files are first sent to a staging
directory obtained from get_upload_directory(), then a module (e.g.
``mydoc.upload``) is asked to take them from there.
"""

from typing import BinaryIO

from ..api import call, fetch_bytes
from ..auth.session import Session
from ..config import UPLOAD_API, UPLOAD_FORM_PATH
from ..logging_setup import log
from .models import UploadDirectory


def get_upload_directory(session: Session) -> UploadDirectory:
    """Return a fresh, empty staging directory."""
    return call(session, "GET", f"{UPLOAD_API}/get-upload-directory", UploadDirectory)


def upload_file(
    session: Session,
    upload_dir: UploadDirectory,
    filename: str,
    content: bytes | BinaryIO,
    content_type: str = "application/octet-stream",
) -> None:
    """
    Send one file to *upload_dir*.

    The platform sanitises *filename*: everything up to a '/' or '\\' is
    dropped and other illegal characters become '_'.  Names containing ':'
    or starting or ending with '.' are rejected by the server.
    """
    log.debug("Uploading %s to staging directory %s", filename, upload_dir)
    # The form endpoint answers with a page, not JSON; only errors matter
    fetch_bytes(
        session,
        UPLOAD_FORM_PATH,
        method="POST",
        data={"uploadDir": upload_dir.upload_dir},
        files={"file": (filename, content, content_type)},
    )
