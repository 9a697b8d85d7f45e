"""Use case for classification enhanced by the feedback-trained weights."""
import logging
import time
from typing import Optional

from fastapi import UploadFile

from ....core.exceptions import ValidationError
from ....domain.constants import ANALYSIS_ENHANCED_CLASSIFICATION
from ....domain.models.analysis_result import AnalysisResult
from ....domain.repositories.result_repository import ResultRepository
from ....infrastructure.storage.upload_storage import UploadStorage
from ....processing.image_ops import load_image_array
from ....processing.models.manager import ModelManager
from ....utils.datetime_utils import MonotonicMillis, utc_now
from ...dto.analysis_dto import AnalysisResultResponse
from ...services.training_system import TrainingSystemService
from .result_mapping import to_result_response

logger = logging.getLogger(__name__)


class EnhancedClassifyUseCase:
    """
    Classify with a catalog model, then adjust the predictions with what the
    training system has learned and drop those under the threshold.
    """

    def __init__(
        self,
        result_repository: ResultRepository,
        upload_storage: UploadStorage,
        model_manager: ModelManager,
        training_system: TrainingSystemService,
        id_generator: MonotonicMillis,
    ) -> None:
        self.result_repository = result_repository
        self.upload_storage = upload_storage
        self.model_manager = model_manager
        self.training_system = training_system
        self.id_generator = id_generator

    async def execute(
        self,
        file: UploadFile,
        model: str = "mobilenet",
        threshold: float = 0.5,
        dataset: Optional[str] = None,
    ) -> AnalysisResultResponse:
        if not 0.0 <= threshold <= 1.0:
            raise ValidationError("Threshold must be between 0 and 1")

        stored = await self.upload_storage.save_image(file)
        started = time.perf_counter()

        image = load_image_array(stored.path)
        predictions = self.model_manager.classify_image(model, image)
        predictions = await self.training_system.generate_dynamic_predictions(
            [{**prediction, "model": model} for prediction in predictions],
            model,
        )
        predictions = await self.training_system.apply_learned_weights(predictions, model)
        filtered = [prediction for prediction in predictions if prediction["confidence"] >= threshold]

        processing_time_ms = (time.perf_counter() - started) * 1000

        result = AnalysisResult(
            id=self.id_generator.next(),
            type=ANALYSIS_ENHANCED_CLASSIFICATION,
            image_path=stored.path,
            timestamp=utc_now(),
            payload={
                "predictions": [
                    {
                        "class": prediction["class"],
                        "confidence": prediction["confidence"],
                        "rank": prediction["rank"],
                        "modelAccuracy": prediction["model_accuracy"],
                        "trainingDataPoints": prediction["training_data_points"],
                        "isLearned": prediction["is_learned"],
                    }
                    for prediction in filtered
                ],
                "threshold": threshold,
            },
            dataset=dataset or None,
            model=model,
            processing_time_ms=processing_time_ms,
        )
        await self.result_repository.save(result)

        logger.info(
            f"Enhanced classification {result.id} with {model}: "
            f"{len(filtered)}/{len(predictions)} predictions above {threshold}"
        )
        return to_result_response(result)
