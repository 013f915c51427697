"""
Directory listing.
"""

import os
from typing import List, Optional

from asyncer import asyncify

from ..logger import logger
from .exceptions import from_os_error
from .paths import resolve_path
from .types import EntryKind, ListEntry


@asyncify
def _scan_directory(path: str) -> List[ListEntry]:
    entries = []
    with os.scandir(path) as it:
        for entry in it:
            # Follows symlinks, a link to a directory is listed as a directory
            kind = EntryKind.DIRECTORY if entry.is_dir() else EntryKind.FILE
            # Undecodable bytes in a name become U+FFFD
            name = os.fsencode(entry.name).decode("utf-8", "replace")
            entries.append(ListEntry(name=name, kind=kind))
    return entries


async def list_entries(path: Optional[str] = None, sort: bool = False) -> List[ListEntry]:
    """
    List the immediate children of a directory.

    Args:
        path: Directory to list, "." when None
        sort: Order entries by their tagged display string instead of the
            filesystem's native order

    Raises:
        InternalError: The directory cannot be opened or an entry cannot be read
    """
    root = resolve_path(path)
    try:
        entries = await _scan_directory(root)
    except OSError as e:
        logger.warning(f"Failed to list directory '{root}': {e}")
        raise from_os_error(e, root)

    if sort:
        entries.sort(key=lambda entry: entry.display)

    return entries
