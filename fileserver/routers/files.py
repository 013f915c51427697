from typing import List

from fastapi import APIRouter, Request, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from ..config import settings
from ..files import (
    BadRequestError,
    DeleteFileRequest,
    DownloadFileRequest,
    ListRequest,
    delete_file,
    list_entries,
    read_file,
    receive_upload,
)

router = APIRouter(
    prefix="/api",
    tags=["files"],
)

UPLOAD_REQUEST_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "multipart/form-data": {
                "schema": {
                    "type": "object",
                    "properties": {
                        "path": {
                            "type": "string",
                            "description": "Target folder path where files will be uploaded",
                        },
                        "file": {
                            "type": "array",
                            "items": {"type": "string", "format": "binary"},
                            "description": "File(s) to upload",
                        },
                    },
                }
            }
        },
    }
}


@router.post(
    "/ls",
    response_model=List[str],
    responses={500: {"description": "Internal server error"}},
)
async def list_files_endpoint(request: ListRequest):
    """List files and folders in path, "." when omitted"""
    entries = await list_entries(request.path)
    return [entry.display for entry in entries]


@router.post(
    "/upload",
    response_model=str,
    openapi_extra=UPLOAD_REQUEST_BODY,
    responses={
        400: {"description": "Bad request"},
        500: {"description": "Internal server error"},
    },
)
async def upload_files_endpoint(request: Request):
    """Upload one or more files into the folder given by the "path" field"""
    try:
        async with request.form(
            max_files=settings.upload.max_files,
            max_fields=settings.upload.max_fields,
        ) as form:
            result = await receive_upload(form.multi_items())
    except (MultiPartException, StarletteHTTPException) as e:
        raise BadRequestError(f"Malformed multipart body: {e}")

    return result.summary


@router.post(
    "/download",
    response_class=Response,
    responses={
        200: {
            "description": "File content",
            "content": {"application/octet-stream": {}},
        },
        404: {"description": "File not found"},
        500: {"description": "Internal server error"},
    },
)
async def download_file_endpoint(request: DownloadFileRequest):
    """Download a file as an attachment named after the requested path"""
    contents = await read_file(request.file_path)

    response = Response(content=contents, media_type="application/octet-stream")
    # Raw UTF-8 value, Starlette would encode a str header as latin-1
    response.raw_headers.append(
        (
            b"content-disposition",
            f'attachment; filename="{request.file_path}"'.encode("utf-8"),
        )
    )
    return response


@router.post(
    "/delete",
    response_model=str,
    responses={
        404: {"description": "File not found"},
        500: {"description": "Internal server error"},
    },
)
async def delete_file_endpoint(request: DeleteFileRequest):
    """Delete a single file"""
    result = await delete_file(request.file_path)
    return result.value
