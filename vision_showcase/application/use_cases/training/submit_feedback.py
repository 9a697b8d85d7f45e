"""Use case for submitting user feedback on predictions."""
import logging
from typing import Optional

from ....core.config import get_settings
from ....domain.models.training import ModelPrediction, UserFeedback
from ...dto.training_dto import FeedbackRequest, FeedbackResponse, FineTuneResult
from ...services.training_system import UNKNOWN_MODEL, TrainingSystemService

logger = logging.getLogger(__name__)


class SubmitFeedbackUseCase:
    """
    Stores a feedback sample and, every AUTO_FINE_TUNE_INTERVAL samples,
    fine-tunes the model the feedback was about.
    """

    def __init__(
        self,
        training_system: TrainingSystemService,
        auto_fine_tune_interval: Optional[int] = None,
    ) -> None:
        self.training_system = training_system
        self.auto_fine_tune_interval = (
            auto_fine_tune_interval
            if auto_fine_tune_interval is not None
            else get_settings().auto_fine_tune_interval
        )

    async def execute(self, request: FeedbackRequest) -> FeedbackResponse:
        predictions = [
            ModelPrediction(
                class_name=prediction.class_name,
                confidence=prediction.confidence,
                model=prediction.model or request.model or UNKNOWN_MODEL,
            )
            for prediction in request.predictions
        ]
        feedback = UserFeedback(
            is_correct=request.feedback.is_correct,
            confidence=request.feedback.confidence,
            correct_class=request.feedback.correct_class,
            user_annotations=list(request.feedback.user_annotations),
        )

        sample = await self.training_system.collect_training_data(request.image, predictions, feedback)
        total = await self.training_system.total_samples()

        fine_tune = None
        if self.auto_fine_tune_interval > 0 and total % self.auto_fine_tune_interval == 0:
            model_name = request.model or predictions[0].model
            logger.info(f"Auto fine-tuning {model_name} after {total} training samples")
            fine_tune = FineTuneResult(**await self.training_system.fine_tune_model(model_name))

        return FeedbackResponse(
            sample_id=sample.id,
            total_training_samples=total,
            fine_tune=fine_tune,
        )
