"""Value types of the upload module."""

from pydantic import BaseModel, ConfigDict, Field


class UploadDirectory(BaseModel):
    """
    Handle to a server-side staging directory for uploads: a random
    30-character hexadecimal string.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    upload_dir: str = Field(alias="uploadDir", min_length=1)

    def __str__(self) -> str:
        return self.upload_dir
