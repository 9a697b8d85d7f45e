"""Use case for starting a simulated large-scale training job."""
import logging

from ....core.config import get_settings
from ....core.exceptions import ValidationError
from ....domain.models.training import TrainingConfig
from ...dto.training_dto import TrainingJobCreateRequest, TrainingJobResponse
from ...services.training_jobs import TrainingJobService
from .job_mapping import to_job_response

logger = logging.getLogger(__name__)


class StartTrainingJobUseCase:
    """Fills omitted hyperparameters from settings and starts the job in the background"""

    def __init__(self, job_service: TrainingJobService) -> None:
        self.job_service = job_service

    async def execute(self, request: TrainingJobCreateRequest) -> TrainingJobResponse:
        settings = get_settings()
        try:
            config = TrainingConfig(
                batch_size=request.batch_size or settings.training_batch_size,
                epochs=request.epochs or settings.training_epochs,
                learning_rate=request.learning_rate or settings.training_learning_rate,
                checkpoint_frequency=request.checkpoint_frequency or settings.training_checkpoint_frequency,
                max_images=request.max_images,
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e

        job = await self.job_service.start_training(request.dataset, request.model, config)
        return to_job_response(job)
