"""Use case for simulated batch processing of many images."""
import logging
import random
from pathlib import Path
from typing import List, Optional

from fastapi import UploadFile

from ....core.exceptions import InvalidUploadError, ValidationError
from ....domain.constants import ALLOWED_IMAGE_EXTENSIONS
from ....processing.mock_results import simulate_batch_item
from ....utils.datetime_utils import now_iso
from ...dto.analysis_dto import BatchItemResult, BatchProcessResponse, BatchStats

logger = logging.getLogger(__name__)


class BatchProcessUseCase:
    """Runs the simulated detector over every uploaded file and aggregates the outcome"""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    async def execute(self, files: List[UploadFile], model: str = "cocoSsd") -> BatchProcessResponse:
        if not files:
            raise ValidationError("At least one image is required")

        results: List[BatchItemResult] = []
        for index, file in enumerate(files):
            if not file.filename or Path(file.filename).suffix.lower() not in ALLOWED_IMAGE_EXTENSIONS:
                raise InvalidUploadError(f"Invalid image file {file.filename}")

            content = await file.read()
            item = simulate_batch_item(index, file.filename, len(content), model, self._rng)
            results.append(BatchItemResult(**item, timestamp=now_iso()))

        successful = sum(1 for result in results if result.status == "success")
        stats = BatchStats(
            total_files=len(files),
            processed=len(results),
            successful=successful,
            failed=len(results) - successful,
            avg_processing_time=sum(result.processing_time for result in results) / len(results),
            total_detections=sum(len(result.detections) for result in results),
        )

        logger.info(f"Batch processed {stats.processed} files with {model}: {stats.successful} succeeded")
        return BatchProcessResponse(model=model, results=results, stats=stats)
