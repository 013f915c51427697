"""
Multipart upload handling.

Parts are consumed in the order they arrived. A text part named "path" sets
the target directory for every file part after it; each file part is written
to that directory, creating it first when needed. Files written before a
failing part are left on disk.
"""

from typing import Iterable, Optional, Tuple, Union

import aiofiles
from aiofiles import os as aioos
from starlette.datastructures import UploadFile

from ..config import settings
from ..logger import logger
from .exceptions import BadRequestError, from_os_error
from .paths import join_path
from .types import UploadResult

PATH_FIELD = "path"

UploadPart = Tuple[str, Union[str, UploadFile]]


async def _read_path_field(value: Union[str, UploadFile]) -> str:
    if isinstance(value, str):
        return value
    # A "path" part sent with a file name still carries the path as its body
    data = await value.read()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        raise BadRequestError("Target path is not valid UTF-8")


async def _write_part(target_dir: str, file: UploadFile, chunk_size: int) -> None:
    if target_dir:
        await aioos.makedirs(target_dir, exist_ok=True)

    file_path = join_path(target_dir, file.filename or "")
    async with aiofiles.open(file_path, "wb") as f:
        await file.seek(0)
        while chunk := await file.read(chunk_size):
            await f.write(chunk)


async def receive_upload(
    parts: Iterable[UploadPart], chunk_size: Optional[int] = None
) -> UploadResult:
    """
    Persist the file parts of one upload request.

    Args:
        parts: (field name, value) pairs in arrival order. Values are str for
            plain text fields and UploadFile for parts with a file name.
        chunk_size: Write chunk size, defaults to the configured value

    Raises:
        BadRequestError: A part has no file name, or no file was written
        InternalError: Creating the target directory or writing a file failed
    """
    chunk_size = chunk_size or settings.upload.chunk_size
    target_dir = ""
    result = UploadResult()

    for field_name, value in parts:
        if field_name == PATH_FIELD:
            target_dir = await _read_path_field(value)
            continue

        if not isinstance(value, UploadFile) or not value.filename:
            raise BadRequestError(f"Field '{field_name}' has no file name")

        try:
            await _write_part(target_dir, value, chunk_size)
        except OSError as e:
            logger.error(
                f"Upload of '{value.filename}' to '{target_dir}' failed after "
                f"{len(result.files)} file(s) were written: {e}"
            )
            raise from_os_error(e, join_path(target_dir, value.filename))

        result.files.append(value.filename)

    if not result.files:
        raise BadRequestError("No files were uploaded")

    logger.info(f"Uploaded {len(result.files)} file(s) to '{target_dir}'")
    return result
