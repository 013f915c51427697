"""
File and folder operations over the local filesystem.

This module provides:
- Directory listing with kind-tagged entries
- Folder creation and renaming
- Multipart upload of one or more files
- File download and deletion
- A placeholder search
"""

from .exceptions import (
    BadRequestError,
    FileOperationError,
    InternalError,
    NotFoundError,
)
from .folders import create_folder, rename_folder
from .listing import list_entries
from .search import search_files
from .transfer import delete_file, read_file
from .types import (
    CreateFolderRequest,
    DeleteFileRequest,
    DownloadFileRequest,
    EntryKind,
    ListEntry,
    ListRequest,
    OperationStatus,
    RenameFolderRequest,
    SearchRequest,
    SortRequest,
    UploadResult,
)
from .upload import receive_upload

__all__ = [
    # Errors
    "BadRequestError",
    "FileOperationError",
    "InternalError",
    "NotFoundError",
    # Types
    "CreateFolderRequest",
    "DeleteFileRequest",
    "DownloadFileRequest",
    "EntryKind",
    "ListEntry",
    "ListRequest",
    "OperationStatus",
    "RenameFolderRequest",
    "SearchRequest",
    "SortRequest",
    "UploadResult",
    # Operations
    "create_folder",
    "delete_file",
    "list_entries",
    "read_file",
    "receive_upload",
    "rename_folder",
    "search_files",
]
