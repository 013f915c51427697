"""
File search.

Only a placeholder: the query is accepted and a fixed result is returned
without touching the filesystem.
"""

from .types import OperationStatus


async def search_files(query: str) -> OperationStatus:
    return OperationStatus.SEARCH_PLACEHOLDER
