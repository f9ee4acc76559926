"""Temporary upload persistence and cleanup."""

import asyncio
import shutil
import uuid
from pathlib import Path

from fastapi import UploadFile
from speech_common.logging import setup_logging

from exceptions import UploadStorageError

logger = setup_logging()


def _copy_upload(upload: UploadFile, target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    upload.file.seek(0)
    with open(target, "wb") as f:
        shutil.copyfileobj(upload.file, f)


async def save_upload(upload: UploadFile, upload_dir: Path) -> Path:
    """
    Writes an uploaded file to a unique path under the upload directory.

    The original suffix is kept so the transcoder can detect the container.

    Raises:
        UploadStorageError: If the file cannot be written.
    """
    suffix = Path(upload.filename or "").suffix.lower()
    target = upload_dir / f"{uuid.uuid4().hex}{suffix}"
    try:
        await asyncio.to_thread(_copy_upload, upload, target)
    except OSError as e:
        remove_files(target)
        logger.error(
            "Failed to save upload",
            extra={"file_name": upload.filename, "upload_path": str(target)},
        )
        raise UploadStorageError(upload.filename or "", cause=e) from e
    logger.info(
        "Upload saved",
        extra={"file_name": upload.filename, "upload_path": str(target)},
    )
    return target


def remove_files(*paths: Path) -> None:
    """Deletes temporary files, ignoring ones that were never created."""
    for path in paths:
        try:
            path.unlink(missing_ok=True)
        except OSError:
            logger.warning("Failed to delete temp file", extra={"path": str(path)})
