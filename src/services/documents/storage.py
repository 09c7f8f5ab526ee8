"""Disk storage for uploaded documents."""

from __future__ import annotations

import asyncio
import logging
import uuid
from dataclasses import dataclass
from pathlib import Path

from fastapi import UploadFile

from core.config import Settings
from core.exceptions import FileTooLargeError


logger = logging.getLogger(__name__)

_CHUNK_SIZE = 1024 * 1024
TRIAL_SUBDIR = "trial"


@dataclass(frozen=True, slots=True)
class StoredFile:
    path: Path
    size: int
    original_name: str


def ensure_upload_dirs(settings: Settings) -> None:
    """Create the upload directory and its free-trial subdirectory."""
    root = Path(settings.UPLOAD_DIR)
    for directory in (root, root / TRIAL_SUBDIR):
        directory.mkdir(parents=True, exist_ok=True)
    logger.info("Upload directory ready at %s", root.resolve())


def upload_dir(settings: Settings, *, trial: bool = False) -> Path:
    root = Path(settings.UPLOAD_DIR)
    return root / TRIAL_SUBDIR if trial else root


async def save_upload(
    upload: UploadFile, directory: Path, max_bytes: int
) -> StoredFile:
    """Write an upload to `directory` under a unique name.

    Raises:
        FileTooLargeError: if the upload exceeds `max_bytes`.
    """
    original_name = Path(upload.filename or "document").name
    target = directory / f"{uuid.uuid4().hex}{Path(original_name).suffix.lower()}"

    chunks: list[bytes] = []
    size = 0
    while chunk := await upload.read(_CHUNK_SIZE):
        size += len(chunk)
        if size > max_bytes:
            raise FileTooLargeError(
                f"{original_name} exceeds the {max_bytes // (1024 * 1024)} MB limit"
            )
        chunks.append(chunk)

    await asyncio.to_thread(target.write_bytes, b"".join(chunks))
    return StoredFile(path=target, size=size, original_name=original_name)


def remove_file(path: str | Path) -> None:
    """Delete a stored file; a missing file is not an error."""
    try:
        Path(path).unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Could not delete %s: %s", path, e)


async def remove_file_later(path: str | Path, delay_seconds: float) -> None:
    """Background task: delete a temporary upload after a short delay."""
    await asyncio.sleep(delay_seconds)
    await asyncio.to_thread(remove_file, path)
