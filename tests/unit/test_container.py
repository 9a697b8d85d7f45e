"""
Unit tests for the DI container wiring.
"""
import pytest
from fastapi import HTTPException

from vision_showcase.api.v1.errors import to_http_exception
from vision_showcase.application.services.training_jobs import TrainingJobService
from vision_showcase.application.use_cases.analysis import AnalyzeImageUseCase
from vision_showcase.application.use_cases.chat import SendChatMessageUseCase
from vision_showcase.core.exceptions import (
    DatasetNotFoundError,
    InvalidUploadError,
    TrainingJobStateError,
    UploadTooLargeError,
)
from vision_showcase.di.base_container import BaseContainer
from vision_showcase.di.container import DIContainer
from vision_showcase.domain.repositories.result_repository import ResultRepository
from vision_showcase.infrastructure.memory.in_memory_repositories import InMemoryResultRepository


class TestBaseContainer:
    def test_missing_key(self):
        with pytest.raises(ValueError, match="Dependency not registered: ResultRepository"):
            BaseContainer().get(ResultRepository)

    def test_factory_builds_each_time(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        assert container.get("thing") is not container.get("thing")


class TestDIContainer:
    def test_memory_backend_wiring(self, mock_env):
        container = DIContainer()

        assert isinstance(container.get(ResultRepository), InMemoryResultRepository)
        assert not container.has("database")
        assert container.get(TrainingJobService) is container.get(TrainingJobService)

        use_case = container.get(AnalyzeImageUseCase)
        assert use_case.result_repository is container.get(ResultRepository)
        assert isinstance(container.get(SendChatMessageUseCase), SendChatMessageUseCase)


class TestErrorMapping:
    @pytest.mark.parametrize(
        "exc,status_code",
        [
            (UploadTooLargeError(1), 413),
            (InvalidUploadError("bad"), 400),
            (DatasetNotFoundError("x"), 404),
            (TrainingJobStateError("job_1", "completed", "pause"), 409),
            (RuntimeError("boom"), 500),
        ],
    )
    def test_status_codes(self, exc, status_code):
        assert to_http_exception(exc).status_code == status_code

    def test_internal_details_hidden(self):
        error = to_http_exception(RuntimeError("connection string leaked"))
        assert "leaked" not in error.detail

    def test_http_exception_passthrough(self):
        original = HTTPException(status_code=418, detail="teapot")
        assert to_http_exception(original) is original
