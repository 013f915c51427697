"""
File download and deletion.
"""

import aiofiles
from aiofiles import os as aioos

from ..logger import logger
from .exceptions import from_os_error
from .types import OperationStatus


async def read_file(file_path: str) -> bytes:
    """
    Read an entire file into memory.

    Raises:
        NotFoundError: The file does not exist
        InternalError: Any other failure, e.g. the path is a directory
    """
    try:
        async with aiofiles.open(file_path, "rb") as f:
            return await f.read()
    except OSError as e:
        logger.warning(f"Failed to read file '{file_path}': {e}")
        raise from_os_error(e, file_path, not_found=True)


async def delete_file(file_path: str) -> OperationStatus:
    """
    Remove a single file. Directories are not removed.

    Raises:
        NotFoundError: The file does not exist
        InternalError: Any other failure
    """
    try:
        await aioos.remove(file_path)
    except OSError as e:
        logger.warning(f"Failed to delete file '{file_path}': {e}")
        raise from_os_error(e, file_path, not_found=True)

    logger.info(f"Deleted file '{file_path}'")
    return OperationStatus.FILE_DELETED
