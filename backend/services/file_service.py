import os
import tempfile
from typing import Optional

from fastapi import UploadFile


async def save_temp_file(file: UploadFile, directory: Optional[str] = None) -> str:
    """
    Async-safe: reads the uploaded file bytes without blocking the event loop.
    Returns the path to the saved temp file. The caller owns deleting it.
    """
    if directory:
        os.makedirs(directory, exist_ok=True)
    suffix = os.path.splitext(file.filename or "upload")[1] or ".pdf"
    tmp_fd, tmp_path = tempfile.mkstemp(suffix=suffix, dir=directory)
    try:
        with os.fdopen(tmp_fd, "wb") as tmp:
            tmp.write(await file.read())
    except Exception:
        delete_file(tmp_path)
        raise
    return tmp_path


def delete_file(path: str) -> None:
    """
    Deletes the file at the given path.
    Silently passes if the file does not exist or (on Windows) the handle
    is still held; the OS cleans up its temp dir regardless.
    """
    try:
        os.remove(path)
    except (FileNotFoundError, PermissionError):
        pass
