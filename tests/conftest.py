"""
Shared pytest fixtures for vision_showcase tests.
"""
import io
import os
import random
from unittest.mock import MagicMock, patch

import pytest
from PIL import Image

from vision_showcase.infrastructure.memory.in_memory_repositories import (
    InMemoryChatRepository,
    InMemoryDatasetRepository,
    InMemoryResultRepository,
    InMemoryTrainingRepository,
)


@pytest.fixture
def mock_env(tmp_path):
    """Fixture to set common test environment variables."""
    env_vars = {
        "STORAGE_BACKEND": "memory",
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_vision_showcase",
        "UPLOAD_DIR": str(tmp_path / "uploads"),
        "UPLOAD_MAX_MB": "1",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings(tmp_path):
    """Fixture to mock get_settings for tests. Patches the modules that read settings."""
    mock = MagicMock()
    mock.storage_backend = "memory"
    mock.upload_dir = str(tmp_path / "uploads")
    mock.upload_max_mb = 1
    mock.training_batch_size = 4
    mock.training_epochs = 2
    mock.training_learning_rate = 0.001
    mock.training_checkpoint_frequency = 1
    mock.training_step_delay_seconds = 0.0
    mock.image_cache_limit = 1000
    mock.fine_tune_min_samples = 10
    mock.auto_fine_tune_interval = 10
    mock.chat_history_limit = 200

    # Patch at the use sites (modules import get_settings at load time)
    with patch("vision_showcase.core.config.get_settings", return_value=mock), patch(
        "vision_showcase.infrastructure.storage.upload_storage.get_settings", return_value=mock
    ), patch(
        "vision_showcase.application.use_cases.training.start_training_job.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def png_bytes():
    """A small, valid PNG image."""
    buffer = io.BytesIO()
    Image.new("RGB", (32, 24), color=(200, 120, 40)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def result_repository():
    return InMemoryResultRepository()


@pytest.fixture
def training_repository():
    return InMemoryTrainingRepository()


@pytest.fixture
def dataset_repository():
    return InMemoryDatasetRepository()


@pytest.fixture
def chat_repository():
    return InMemoryChatRepository()
