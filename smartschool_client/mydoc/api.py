"""
My Documents: the per-user virtual file system hosted by the platform.

Every function is a thin caller of ``api.call`` / ``api.fetch_bytes``; they
only build the path and body and name the expected result type.
"""

from uuid import UUID

from ..api import call, fetch_bytes
from ..auth.session import Session
from ..config import API_ROOT
from ..upload.models import UploadDirectory
from .models import (
    DEFAULT_FOLDER_COLOR,
    ROOT_FOLDER,
    File,
    Folder,
    FolderColor,
    FolderContents,
    FolderRef,
    HistoryEntry,
    Revision,
    Template,
    UploadResult,
    folder_ref,
)


def _files(suffix: str = "") -> str:
    return f"{API_ROOT}/files{suffix}"


def _folders(suffix: str = "") -> str:
    return f"{API_ROOT}/folders{suffix}"


# ------------------------------------------------------------------ #
# Listing
# ------------------------------------------------------------------ #

def get_recent_files(session: Session) -> list[File]:
    """Files most recently modified by the user, newest first."""
    return call(session, "GET", _files("/recent"), list[File])


def get_folder_contents(session: Session, folder: FolderRef = ROOT_FOLDER) -> tuple[list[File], list[Folder]]:
    """
    List a folder.  *folder* is a folder UUID or one of ROOT_FOLDER,
    FAVORITES_FOLDER, TRASHED_FOLDER.
    """
    ref = folder_ref(folder)
    path = f"{API_ROOT}/directory-listing" + (f"/{ref}" if ref else "")
    contents = call(session, "GET", path, FolderContents)
    return contents.files, contents.folders


def get_file_history(session: Session, file_id: UUID) -> list[HistoryEntry]:
    return call(session, "GET", _files(f"/{file_id}/history"), list[HistoryEntry])


def get_folder_history(session: Session, folder_id: UUID) -> list[HistoryEntry]:
    return call(session, "GET", _folders(f"/{folder_id}/history"), list[HistoryEntry])


def get_file_revisions(session: Session, file_id: UUID) -> list[Revision]:
    return call(session, "GET", _files(f"/{file_id}/revisions"), list[Revision])


def get_folder_parents(session: Session, folder_id: UUID) -> list[UUID]:
    """Ids of the folders above *folder_id*, outermost first."""
    return call(session, "GET", _folders(f"/{folder_id}/parents"), list[UUID])


# ------------------------------------------------------------------ #
# Creation
# ------------------------------------------------------------------ #

def create_folder(
    session: Session,
    parent: FolderRef,
    name: str,
    color: FolderColor = DEFAULT_FOLDER_COLOR,
) -> Folder:
    body = {"name": name, "parentId": folder_ref(parent), "color": FolderColor(color).value}
    return call(session, "POST", _folders("/"), Folder, json=body)


def create_file_from_template(
    session: Session,
    parent: FolderRef,
    name: str,
    template: Template,
    reference: str | None = None,
) -> File:
    """
    Create an empty Word/Excel/PowerPoint document, or a copy of a custom
    template (``Template.CUSTOM`` plus the template's *reference*).
    """
    template = Template(template)
    if (template is Template.CUSTOM) != (reference is not None):
        raise ValueError("A template reference is required for, and only for, Template.CUSTOM")
    body = {
        "fileName": name,
        "targetFolderId": folder_ref(parent),
        "templateType": template.value,
    }
    if reference is not None:
        body["templateReference"] = reference
    return call(session, "POST", _files("/createfromtemplate"), File, json=body)


def upload(session: Session, parent: FolderRef, upload_dir: UploadDirectory) -> list[File]:
    """
    Move the files previously sent to *upload_dir* (see the upload module)
    into *parent*.
    """
    body = {"parentId": folder_ref(parent), "uploadDir": upload_dir.upload_dir}
    result = call(session, "POST", _files("/upload"), UploadResult, json=body)
    return list(result.files.values())


# ------------------------------------------------------------------ #
# Modification
# ------------------------------------------------------------------ #

def change_folder_color(session: Session, folder_id: UUID, color: FolderColor) -> Folder:
    body = {"newColor": FolderColor(color).value}
    return call(session, "POST", _folders(f"/{folder_id}/change-color"), Folder, json=body)


def rename_file(session: Session, file_id: UUID, new_name: str) -> File:
    return call(session, "POST", _files(f"/{file_id}/rename"), File, json={"newName": new_name})


def rename_folder(session: Session, folder_id: UUID, new_name: str) -> Folder:
    return call(session, "POST", _folders(f"/{folder_id}/rename"), Folder, json={"newName": new_name})


def copy_file(session: Session, file_id: UUID, destination: FolderRef) -> File:
    """Copy a file; returns the new copy.  Favorites and trash are not valid destinations."""
    body = {"parentId": folder_ref(destination)}
    return call(session, "POST", _files(f"/{file_id}/copy"), File, json=body)


def copy_folder(session: Session, folder_id: UUID, destination: FolderRef) -> Folder:
    body = {"parentId": folder_ref(destination)}
    return call(session, "POST", _folders(f"/{folder_id}/copy"), Folder, json=body)


def move_file(session: Session, file_id: UUID, destination: FolderRef) -> File:
    body = {"parentId": folder_ref(destination)}
    return call(session, "POST", _files(f"/{file_id}/move"), File, json=body)


def move_folder(session: Session, folder_id: UUID, destination: FolderRef) -> Folder:
    body = {"parentId": folder_ref(destination)}
    return call(session, "POST", _folders(f"/{folder_id}/move"), Folder, json=body)


def restore_file(session: Session, file_id: UUID, destination: FolderRef = ROOT_FOLDER) -> File:
    """Take a file out of the trash into *destination*."""
    body = {"parentId": folder_ref(destination)}
    return call(session, "POST", _files(f"/{file_id}/restore"), File, json=body)


def restore_folder(session: Session, folder_id: UUID, destination: FolderRef = ROOT_FOLDER) -> Folder:
    body = {"parentId": folder_ref(destination)}
    return call(session, "POST", _folders(f"/{folder_id}/restore"), Folder, json=body)


def restore_revision(session: Session, file_id: UUID, revision_id: UUID) -> Revision:
    """Make an older revision the current one; returns the new current revision."""
    path = _files(f"/{file_id}/revisions/{revision_id}/restore")
    return call(session, "POST", path, Revision)


def mark_file_as_favorite(session: Session, file_id: UUID) -> File:
    return call(session, "POST", _files(f"/{file_id}/mark-as-favourite"), File)


def unmark_file_as_favorite(session: Session, file_id: UUID) -> File:
    return call(session, "POST", _files(f"/{file_id}/unmark-as-favourite"), File)


def mark_folder_as_favorite(session: Session, folder_id: UUID) -> Folder:
    return call(session, "POST", _folders(f"/{folder_id}/mark-as-favourite"), Folder)


def unmark_folder_as_favorite(session: Session, folder_id: UUID) -> Folder:
    return call(session, "POST", _folders(f"/{folder_id}/unmark-as-favourite"), Folder)


# ------------------------------------------------------------------ #
# Removal
# ------------------------------------------------------------------ #

def trash_file(session: Session, file_id: UUID) -> None:
    call(session, "POST", _files(f"/{file_id}/trash"))


def trash_folder(session: Session, folder_id: UUID) -> None:
    call(session, "POST", _folders(f"/{folder_id}/trash"))


def delete_file(session: Session, file_id: UUID) -> None:
    """Delete a file for good.  Only trashed files can be deleted."""
    call(session, "DELETE", _files(f"/{file_id}"))


def delete_folder(session: Session, folder_id: UUID) -> None:
    call(session, "DELETE", _folders(f"/{folder_id}"))


# ------------------------------------------------------------------ #
# Download
# ------------------------------------------------------------------ #

def download_file(session: Session, file_id: UUID) -> bytes:
    """Content of the current revision of a file."""
    return fetch_bytes(session, _files(f"/{file_id}/download"))


def download_revision(session: Session, file_id: UUID, revision_id: UUID) -> bytes:
    return fetch_bytes(session, _files(f"/{file_id}/revisions/{revision_id}/download"))
