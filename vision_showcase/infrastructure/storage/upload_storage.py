"""
Disk storage for uploaded images.

Files land in the configured upload directory as `<epoch_ms>-<original name>`
and are served back under /uploads.
"""

# Standard library imports
import logging
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# External package imports
from fastapi import UploadFile
from PIL import Image, UnidentifiedImageError

# Local application imports
from ...core.config import get_settings
from ...core.exceptions import InvalidUploadError, UploadTooLargeError
from ...domain.constants import ALLOWED_IMAGE_EXTENSIONS

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


@dataclass
class StoredUpload:
    """What is known about an image once it is on disk"""
    path: str
    filename: str
    size: int
    width: int
    height: int
    format: Optional[str] = None


def safe_filename(filename: str) -> str:
    """Return a filesystem-safe version of a client-supplied file name."""
    name = Path(filename).name
    return re.sub(r"[^a-zA-Z0-9._-]", "_", name)


class UploadStorage:
    """Writes uploads to disk in chunks and validates them as images."""

    def __init__(self, upload_dir: Optional[str] = None, max_mb: Optional[int] = None) -> None:
        settings = get_settings()
        self.upload_dir = Path(upload_dir or settings.upload_dir)
        self.max_mb = max_mb if max_mb is not None else settings.upload_max_mb

    def ensure_dir(self) -> Path:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        return self.upload_dir

    async def save_image(self, file: UploadFile) -> StoredUpload:
        """
        Store an uploaded image.

        Args:
            file: Multipart upload from the request

        Returns:
            StoredUpload with the relative path and image dimensions

        Raises:
            InvalidUploadError: Missing name, disallowed extension or undecodable image
            UploadTooLargeError: File larger than the configured limit
        """
        if file is None or not file.filename:
            raise InvalidUploadError("Missing file name.")

        ext = Path(file.filename).suffix.lower()
        if ext not in ALLOWED_IMAGE_EXTENSIONS:
            allowed = ", ".join(sorted(e.lstrip(".") for e in ALLOWED_IMAGE_EXTENSIONS))
            raise InvalidUploadError(
                f"Invalid image file {file.filename}",
                user_message=f"Invalid image file. Use: {allowed}",
            )

        max_bytes = self.max_mb * 1024 * 1024
        stored_name = f"{int(time.time() * 1000)}-{safe_filename(file.filename)}"
        final_path = self.ensure_dir() / stored_name

        size = 0
        with open(final_path, "wb") as f:
            while True:
                chunk = await file.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > max_bytes:
                    f.close()
                    final_path.unlink(missing_ok=True)
                    raise UploadTooLargeError(self.max_mb)
                f.write(chunk)

        try:
            with Image.open(final_path) as image:
                width, height = image.size
                image_format = image.format
                image.verify()
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            final_path.unlink(missing_ok=True)
            raise InvalidUploadError(
                f"Uploaded file {file.filename} is not a readable image: {e}",
                user_message="Uploaded file is not a readable image.",
            )

        relative_path = (self.upload_dir / stored_name).as_posix()
        logger.info(f"Stored upload {file.filename} as {relative_path} ({size} bytes, {width}x{height})")

        return StoredUpload(
            path=relative_path,
            filename=file.filename,
            size=size,
            width=width,
            height=height,
            format=image_format,
        )
