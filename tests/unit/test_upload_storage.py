"""
Unit tests for UploadStorage.
"""
import io
from pathlib import Path

import pytest
from fastapi import UploadFile

from vision_showcase.core.exceptions import InvalidUploadError, UploadTooLargeError
from vision_showcase.infrastructure.storage.upload_storage import UploadStorage, safe_filename


@pytest.fixture
def storage(tmp_path):
    return UploadStorage(upload_dir=str(tmp_path / "uploads"), max_mb=1)


def _upload(content: bytes, filename: str) -> UploadFile:
    return UploadFile(file=io.BytesIO(content), filename=filename)


class TestUploadStorage:
    """Test suite for UploadStorage.save_image"""

    @pytest.mark.asyncio
    async def test_stores_image_with_dimensions(self, storage, png_bytes):
        stored = await storage.save_image(_upload(png_bytes, "my photo.PNG"))

        assert (stored.width, stored.height) == (32, 24)
        assert stored.size == len(png_bytes)
        assert stored.format == "PNG"
        assert stored.filename == "my photo.PNG"
        assert stored.path.endswith("-my_photo.PNG")
        assert Path(stored.path).read_bytes() == png_bytes

    @pytest.mark.asyncio
    async def test_extension_not_allowed(self, storage, png_bytes):
        with pytest.raises(InvalidUploadError) as exc_info:
            await storage.save_image(_upload(png_bytes, "doc.pdf"))
        assert "Use:" in exc_info.value.user_message

    @pytest.mark.asyncio
    async def test_too_large_removed(self, storage, tmp_path):
        with pytest.raises(UploadTooLargeError):
            await storage.save_image(_upload(b"\0" * (1024 * 1024 + 1), "huge.png"))
        assert list((tmp_path / "uploads").iterdir()) == []

    @pytest.mark.asyncio
    async def test_not_an_image_removed(self, storage, tmp_path):
        with pytest.raises(InvalidUploadError):
            await storage.save_image(_upload(b"plain text", "fake.jpg"))
        assert list((tmp_path / "uploads").iterdir()) == []

    @pytest.mark.asyncio
    async def test_missing_name(self, storage):
        with pytest.raises(InvalidUploadError):
            await storage.save_image(_upload(b"", ""))


def test_safe_filename_strips_directories():
    assert safe_filename("../../etc/pass wd.png") == "pass_wd.png"
