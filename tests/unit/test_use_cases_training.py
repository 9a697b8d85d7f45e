"""
Unit tests for the training use cases.
"""
import random
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from vision_showcase.application.dto.training_dto import (
    AdjustPredictionsRequest,
    FeedbackRequest,
    TrainingJobCreateRequest,
)
from vision_showcase.application.services.training_system import TrainingSystemService
from vision_showcase.application.use_cases.training import (
    AdjustPredictionsUseCase,
    ControlTrainingJobUseCase,
    FineTuneModelUseCase,
    StartTrainingJobUseCase,
    SubmitFeedbackUseCase,
)
from vision_showcase.core.exceptions import ValidationError
from vision_showcase.domain.models.training import TrainingConfig, TrainingJob


def _feedback_request(model=None, prediction_model=None, is_correct=True, correct_class="cat"):
    return FeedbackRequest.model_validate({
        "predictions": [{"class": "cat", "confidence": 0.8, "model": prediction_model}],
        "feedback": {"isCorrect": is_correct, "confidence": 0.9, "correctClass": correct_class},
        "model": model,
    })


@pytest.fixture
def training_system(training_repository):
    return TrainingSystemService(training_repository, min_fine_tune_samples=2, rng=random.Random(9))


class TestSubmitFeedbackUseCase:
    """Test suite for SubmitFeedbackUseCase"""

    @pytest.mark.asyncio
    async def test_sample_recorded_without_fine_tune(self, training_system):
        use_case = SubmitFeedbackUseCase(training_system, auto_fine_tune_interval=10)

        response = await use_case.execute(_feedback_request(model="mobilenet"))

        assert response.sample_id.startswith("training_")
        assert response.total_training_samples == 1
        assert response.fine_tune is None
        samples = (await training_system.export_snapshot())["training_data"]
        assert samples[0]["predictions"][0]["model"] == "mobilenet"

    @pytest.mark.asyncio
    async def test_auto_fine_tune_on_interval(self, training_system):
        use_case = SubmitFeedbackUseCase(training_system, auto_fine_tune_interval=2)

        first = await use_case.execute(_feedback_request(model="cocoSsd"))
        second = await use_case.execute(_feedback_request(model="cocoSsd"))

        assert first.fine_tune is None
        assert second.fine_tune.model == "cocoSsd"
        assert second.fine_tune.fine_tuned is True
        assert second.fine_tune.weights["cat"] == pytest.approx(1.21)

    @pytest.mark.asyncio
    async def test_fine_tune_falls_back_to_prediction_model(self):
        training_system = MagicMock()
        training_system.collect_training_data = AsyncMock(return_value=SimpleNamespace(id="training_1"))
        training_system.total_samples = AsyncMock(return_value=5)
        training_system.fine_tune_model = AsyncMock(
            return_value={"model": "blazeFace", "samples": 1, "fine_tuned": False, "weights": {}}
        )
        use_case = SubmitFeedbackUseCase(training_system, auto_fine_tune_interval=5)

        response = await use_case.execute(_feedback_request(prediction_model="blazeFace"))

        training_system.fine_tune_model.assert_awaited_once_with("blazeFace")
        assert response.fine_tune.fine_tuned is False

    @pytest.mark.asyncio
    async def test_unnamed_predictions_attributed_to_unknown(self, training_system):
        await SubmitFeedbackUseCase(training_system, auto_fine_tune_interval=0).execute(_feedback_request())
        stats = await training_system.get_training_stats()
        assert "unknown" in [perf["model_name"] for perf in stats["model_performance"]]


class TestFineTuneModelUseCase:
    @pytest.mark.asyncio
    async def test_every_tracked_model_when_no_name(self, training_system):
        response = await FineTuneModelUseCase(training_system).execute()

        assert sorted(result.model for result in response.results) == sorted(
            ["mobilenet", "cocoSsd", "efficientNet", "blazeFace"]
        )
        assert not any(result.fine_tuned for result in response.results)


class TestAdjustPredictionsUseCase:
    @pytest.mark.asyncio
    async def test_learned_weights_applied(self, training_system):
        submit = SubmitFeedbackUseCase(training_system, auto_fine_tune_interval=0)
        for _ in range(2):
            await submit.execute(_feedback_request(model="mobilenet"))
        await training_system.fine_tune_model("mobilenet")

        request = AdjustPredictionsRequest.model_validate({
            "model": "mobilenet",
            "predictions": [{"class": "cat", "confidence": 0.7}, {"class": "dog", "confidence": 0.01}],
            "threshold": 0.05,
        })
        response = await AdjustPredictionsUseCase(training_system).execute(request)

        assert [p.class_name for p in response.predictions] == ["cat"]
        assert response.predictions[0].is_learned is True
        assert response.predictions[0].training_data_points == 2
        assert response.predictions[0].model == "mobilenet"


class TestStartTrainingJobUseCase:
    """Test suite for StartTrainingJobUseCase"""

    @pytest.mark.asyncio
    async def test_defaults_filled_from_settings(self, mock_settings):
        job_service = MagicMock()

        async def start(dataset, model, config):
            return TrainingJob(id="job_1", dataset_name=dataset, model_name=model, config=config, created_at=1)

        job_service.start_training = AsyncMock(side_effect=start)
        request = TrainingJobCreateRequest.model_validate({"dataset": "cifar10", "epochs": 3})

        response = await StartTrainingJobUseCase(job_service).execute(request)

        config = job_service.start_training.await_args.args[2]
        assert config == TrainingConfig(batch_size=4, epochs=3, learning_rate=0.001, checkpoint_frequency=1)
        data = response.model_dump(by_alias=True)
        assert data["status"] == "pending"
        assert data["config"]["batchSize"] == 4


class TestControlTrainingJobUseCase:
    @pytest.mark.asyncio
    async def test_unknown_action(self):
        with pytest.raises(ValidationError):
            await ControlTrainingJobUseCase(MagicMock()).execute("job_1", "restart")
