"""Upload staging directories and multipart file uploads."""

from smartschool_client.upload.api import get_upload_directory, upload_file
from smartschool_client.upload.models import UploadDirectory

__all__ = ["UploadDirectory", "get_upload_directory", "upload_file"]
