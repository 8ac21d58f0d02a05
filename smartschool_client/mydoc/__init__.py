"""My Documents module – files, folders, revisions and history."""

from smartschool_client.mydoc.api import (
    change_folder_color,
    copy_file,
    copy_folder,
    create_file_from_template,
    create_folder,
    delete_file,
    delete_folder,
    download_file,
    download_revision,
    get_file_history,
    get_file_revisions,
    get_folder_contents,
    get_folder_history,
    get_folder_parents,
    get_recent_files,
    mark_file_as_favorite,
    mark_folder_as_favorite,
    move_file,
    move_folder,
    rename_file,
    rename_folder,
    restore_file,
    restore_folder,
    restore_revision,
    trash_file,
    trash_folder,
    unmark_file_as_favorite,
    unmark_folder_as_favorite,
    upload,
)
from smartschool_client.mydoc.models import (
    FAVORITES_FOLDER,
    ROOT_FOLDER,
    TRASHED_FOLDER,
    File,
    Folder,
    FolderColor,
    HistoryEntry,
    HistoryEntryUser,
    Revision,
    State,
    Template,
)

__all__ = [
    "FAVORITES_FOLDER",
    "ROOT_FOLDER",
    "TRASHED_FOLDER",
    "File",
    "Folder",
    "FolderColor",
    "HistoryEntry",
    "HistoryEntryUser",
    "Revision",
    "State",
    "Template",
    "change_folder_color",
    "copy_file",
    "copy_folder",
    "create_file_from_template",
    "create_folder",
    "delete_file",
    "delete_folder",
    "download_file",
    "download_revision",
    "get_file_history",
    "get_file_revisions",
    "get_folder_contents",
    "get_folder_history",
    "get_folder_parents",
    "get_recent_files",
    "mark_file_as_favorite",
    "mark_folder_as_favorite",
    "move_file",
    "move_folder",
    "rename_file",
    "rename_folder",
    "restore_file",
    "restore_folder",
    "restore_revision",
    "trash_file",
    "trash_folder",
    "unmark_file_as_favorite",
    "unmark_folder_as_favorite",
    "upload",
]
