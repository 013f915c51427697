"""
Error taxonomy for filesystem operations.

Every failure surfaced to a client is one of three kinds. Each carries the
HTTP status code it maps to; the application turns them into bare status
responses.
"""

from typing import Optional

from fastapi import status


class FileOperationError(Exception):
    """Base class for failures of a file or folder operation"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path


class BadRequestError(FileOperationError):
    """Malformed or absent required input"""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(FileOperationError):
    """Target file does not exist (download and delete only)"""

    status_code = status.HTTP_404_NOT_FOUND


class InternalError(FileOperationError):
    """Any other failure, including most OS errors"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def from_os_error(
    error: OSError, path: str, *, not_found: bool = False
) -> FileOperationError:
    """
    Map an OS error to the error taxonomy.

    Args:
        error: The error raised by the filesystem call
        path: The user supplied path the call operated on
        not_found: Whether a missing target is reported as NotFoundError.
            Only download and delete distinguish it; everywhere else a
            missing path is an internal error like any other OS failure.
    """
    message = f"{type(error).__name__}: {error}"
    if not_found and isinstance(error, FileNotFoundError):
        return NotFoundError(message, path)
    return InternalError(message, path)
