"""
Folder creation and renaming.
"""

from aiofiles import os as aioos

from ..logger import logger
from .exceptions import from_os_error
from .paths import join_path
from .types import OperationStatus


async def create_folder(base: str, name: str) -> OperationStatus:
    """Create exactly one directory level at base/name"""
    folder_path = join_path(base, name)
    try:
        await aioos.mkdir(folder_path)
    except OSError as e:
        logger.warning(f"Failed to create folder '{folder_path}': {e}")
        raise from_os_error(e, folder_path)

    logger.info(f"Created folder '{folder_path}'")
    return OperationStatus.SUCCESS


async def rename_folder(old_path: str, new_path: str) -> OperationStatus:
    """Rename a folder with a single OS level rename"""
    try:
        await aioos.rename(old_path, new_path)
    except OSError as e:
        logger.warning(f"Failed to rename folder '{old_path}' to '{new_path}': {e}")
        raise from_os_error(e, old_path)

    logger.info(f"Renamed folder '{old_path}' to '{new_path}'")
    return OperationStatus.SUCCESS
