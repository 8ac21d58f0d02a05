"""Value types of the My Documents (mydoc) module."""

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Special folder identifiers.  Any other folder is addressed by its UUID.
ROOT_FOLDER = ""
FAVORITES_FOLDER = "favourites"
TRASHED_FOLDER = "trashed"

FolderRef = UUID | str


def folder_ref(folder: FolderRef) -> str:
    """Wire form of a folder reference ('' / 'favourites' / 'trashed' / uuid)."""
    if isinstance(folder, UUID):
        return str(folder)
    if folder in (ROOT_FOLDER, FAVORITES_FOLDER, TRASHED_FOLDER):
        return folder
    return str(UUID(folder))


class FolderColor(str, Enum):
    AQUA = "aqua"
    BLACK = "black"
    BLUE = "blue"
    BROWN = "brown"
    GREEN = "green"
    ORANGE = "orange"
    PINK = "pink"
    PURPLE = "purple"
    RED = "red"
    WHITE = "white"
    YELLOW = "yellow"


DEFAULT_FOLDER_COLOR = FolderColor.YELLOW


class State(str, Enum):
    ACTIVE = "active"
    DELETED = "deleted"
    TRASHED = "trashed"


class Template(str, Enum):
    """Document templates for create_file_from_template()."""

    WORD = "word"
    EXCEL = "excel"
    POWERPOINT = "powerpoint"
    CUSTOM = "template"


class _Resource(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Revision(_Resource):
    # The server also sends a `location` field ({school}_{user}_{account}_{revision}).
    id: UUID
    file_id: UUID
    date: datetime = Field(alias="dateCreated")
    file_name: str = Field(alias="label")
    file_size: int
    file_type: str = Field(alias="mimeType")


class File(_Resource):
    id: UUID
    name: str
    parent_id: str
    state: State
    is_favorite: bool = Field(alias="isFavourite")
    current_revision: Revision
    current_revision_id: UUID
    date_changed: datetime
    date_created: datetime
    date_recent_action: datetime
    date_state_changed: datetime


class Folder(_Resource):
    id: UUID
    name: str
    parent_id: str
    state: State
    color: FolderColor = DEFAULT_FOLDER_COLOR
    is_favorite: bool = Field(alias="isFavourite")
    has_subfolders: bool = Field(alias="hasSubFolders")
    date_changed: datetime
    date_created: datetime
    date_state_changed: datetime


class HistoryEntryUser(_Resource):
    id: str = Field(alias="userIdentifier")
    name: str
    picture_hash: str = Field(alias="userPictureHash")


class HistoryEntry(_Resource):
    date: datetime
    text: str
    user: HistoryEntryUser
    is_download_event: bool
    is_special_event: bool


class FolderContents(_Resource):
    files: list[File]
    folders: list[Folder]


class UploadResult(_Resource):
    # `files` is keyed by file id; the values carry the id as well.
    # The accompanying `exceptions` field is always empty in practice.
    files: dict[str, File]
