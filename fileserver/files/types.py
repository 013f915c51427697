"""
Request and response models for file and folder operations.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class EntryKind(str, Enum):
    """Kind of a directory child"""

    FILE = "file"
    DIRECTORY = "directory"


class ListEntry(BaseModel):
    """One child of a listed directory"""

    name: str
    kind: EntryKind

    @property
    def display(self) -> str:
        if self.kind == EntryKind.DIRECTORY:
            return f"[DIR] {self.name}"
        return f"[FILE] {self.name}"


class OperationStatus(str, Enum):
    """Fixed success values returned by the API"""

    SUCCESS = "Success"
    FILE_DELETED = "File deleted successfully"
    SEARCH_PLACEHOLDER = "Search results"


# Request bodies
class ListRequest(BaseModel):
    path: Optional[str] = Field(
        default=None, description="Directory to list, defaults to '.'"
    )


class SortRequest(BaseModel):
    option: Optional[str] = Field(
        default=None, description="Directory to list sorted, defaults to '.'"
    )


class CreateFolderRequest(BaseModel):
    path: str
    folder_name: str


class RenameFolderRequest(BaseModel):
    folder_name: str  # Current path of the folder
    new_folder_name: str  # Path it is moved to


class SearchRequest(BaseModel):
    query: str


class DownloadFileRequest(BaseModel):
    file_path: str


class DeleteFileRequest(BaseModel):
    file_path: str


# Upload result
class UploadResult(BaseModel):
    """Names of the files written by one upload request, in arrival order"""

    files: List[str] = Field(default_factory=list)

    @property
    def summary(self) -> str:
        return f"Uploaded {len(self.files)} file(s): {', '.join(self.files)}"
