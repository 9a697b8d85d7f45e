"""
Unit tests for the in-memory repositories.
"""
from datetime import datetime, timezone

import pytest

from vision_showcase.domain.models.analysis_result import AnalysisResult
from vision_showcase.domain.models.chat_message import ChatMessage
from vision_showcase.domain.models.dataset import DatasetConfig
from vision_showcase.domain.models.training import ModelPerformance


def _result(result_id: int, result_type: str = "classification") -> AnalysisResult:
    return AnalysisResult(
        id=result_id,
        type=result_type,
        image_path=f"uploads/{result_id}-a.png",
        timestamp=datetime(2025, 1, 1, tzinfo=timezone.utc),
        payload={"predictions": []},
    )


class TestInMemoryResultRepository:
    @pytest.mark.asyncio
    async def test_insertion_order_and_filter(self, result_repository):
        for result_id, result_type in [(3, "ocr"), (1, "facial"), (2, "ocr")]:
            await result_repository.save(_result(result_id, result_type))

        assert [r.id for r in await result_repository.find_all()] == [3, 1, 2]
        assert [r.id for r in await result_repository.find_all("ocr")] == [3, 2]
        assert await result_repository.find_all("detection") == []

    @pytest.mark.asyncio
    async def test_stored_copy_is_isolated(self, result_repository):
        result = _result(7)
        await result_repository.save(result)
        result.payload["predictions"].append({"class": "x"})

        stored = await result_repository.find_by_id(7)
        assert stored.payload == {"predictions": []}
        assert await result_repository.find_by_id(8) is None

    @pytest.mark.asyncio
    async def test_clear_reports_count(self, result_repository):
        await result_repository.save(_result(1))
        await result_repository.save(_result(2))
        assert await result_repository.clear() == 2
        assert await result_repository.clear() == 0


class TestInMemoryTrainingRepository:
    @pytest.mark.asyncio
    async def test_performance_upsert_and_weights_merge(self, training_repository):
        await training_repository.save_performance(ModelPerformance(model_name="mobilenet", accuracy=0.5))
        await training_repository.save_performance(ModelPerformance(model_name="mobilenet", accuracy=0.7))
        await training_repository.save_weights({"mobilenet_cat": 1.1})
        await training_repository.save_weights({"mobilenet_dog": 0.9})

        performance = await training_repository.list_performance()
        assert [(p.model_name, p.accuracy) for p in performance] == [("mobilenet", 0.7)]
        assert await training_repository.get_weights() == {"mobilenet_cat": 1.1, "mobilenet_dog": 0.9}

        await training_repository.clear()
        assert await training_repository.list_performance() == []
        assert await training_repository.get_weights() == {}


class TestInMemoryDatasetRepository:
    @pytest.mark.asyncio
    async def test_save_replaces_by_name(self, dataset_repository):
        await dataset_repository.save(DatasetConfig(name="pets", total_images=10, categories=["cat"]))
        await dataset_repository.save(DatasetConfig(name="pets", total_images=20, categories=["cat", "dog"]))

        datasets = await dataset_repository.find_all()
        assert len(datasets) == 1
        assert (await dataset_repository.find_by_name("pets")).total_images == 20
        assert await dataset_repository.find_by_name("cars") is None


class TestInMemoryChatRepository:
    @pytest.mark.asyncio
    async def test_limit_returns_most_recent(self, chat_repository):
        for index in range(5):
            await chat_repository.append(
                ChatMessage(id=f"msg_{index}", role="user", content=str(index), timestamp=index)
            )

        assert [m.id for m in await chat_repository.list_messages(2)] == ["msg_3", "msg_4"]
        assert len(await chat_repository.list_messages()) == 5
        assert await chat_repository.list_messages(0) == []
