from typing import List

from fastapi import APIRouter

from ..files import (
    CreateFolderRequest,
    RenameFolderRequest,
    SearchRequest,
    SortRequest,
    create_folder,
    list_entries,
    rename_folder,
    search_files,
)

router = APIRouter(
    prefix="/api",
    tags=["folders"],
)

INTERNAL_ERROR = {500: {"description": "Internal server error"}}


@router.post("/mkdir", response_model=str, responses=INTERNAL_ERROR)
async def create_folder_endpoint(request: CreateFolderRequest):
    """Create a single folder named folder_name inside path"""
    result = await create_folder(request.path, request.folder_name)
    return result.value


@router.post("/rename-folder", response_model=str, responses=INTERNAL_ERROR)
async def rename_folder_endpoint(request: RenameFolderRequest):
    """Rename (move) the folder at folder_name to new_folder_name"""
    result = await rename_folder(request.folder_name, request.new_folder_name)
    return result.value


@router.post("/search", response_model=str, responses=INTERNAL_ERROR)
async def search_files_endpoint(request: SearchRequest):
    """Search files. Returns a fixed placeholder result."""
    result = await search_files(request.query)
    return result.value


@router.post("/sort", response_model=List[str], responses=INTERNAL_ERROR)
async def sorted_list_endpoint(request: SortRequest):
    """List a directory with entries sorted by their tagged name"""
    entries = await list_entries(request.option, sort=True)
    return [entry.display for entry in entries]
