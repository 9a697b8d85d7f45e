"""Use case for the fixed-payload upload analyses (classify, detect, segment, facial, ocr, autonomous)."""
import logging
from typing import Optional

from fastapi import UploadFile

from ....domain.models.analysis_result import AnalysisResult
from ....domain.repositories.result_repository import ResultRepository
from ....infrastructure.storage.upload_storage import UploadStorage
from ....processing.mock_results import STATIC_ANALYSIS_TYPES, static_payload
from ....utils.datetime_utils import MonotonicMillis, utc_now
from ....core.exceptions import ValidationError
from ...dto.analysis_dto import AnalysisResultResponse
from .result_mapping import to_result_response

logger = logging.getLogger(__name__)


class AnalyzeImageUseCase:
    """Stores the upload, attaches the mock payload for the analysis type and appends the result"""

    def __init__(
        self,
        result_repository: ResultRepository,
        upload_storage: UploadStorage,
        id_generator: MonotonicMillis,
    ) -> None:
        self.result_repository = result_repository
        self.upload_storage = upload_storage
        self.id_generator = id_generator

    async def execute(
        self,
        analysis_type: str,
        file: UploadFile,
        dataset: Optional[str] = None,
    ) -> AnalysisResultResponse:
        """
        Analyze an uploaded image.

        Args:
            analysis_type: One of the fixed-payload analysis types
            file: Uploaded image
            dataset: Optional dataset the client says the image belongs to

        Returns:
            AnalysisResultResponse with the type-specific payload

        Raises:
            ValidationError: Unknown analysis type or invalid upload
            UploadTooLargeError: Upload above the size limit
        """
        if analysis_type not in STATIC_ANALYSIS_TYPES:
            raise ValidationError(f"Unsupported analysis type: {analysis_type}")

        stored = await self.upload_storage.save_image(file)

        result = AnalysisResult(
            id=self.id_generator.next(),
            type=analysis_type,
            image_path=stored.path,
            timestamp=utc_now(),
            payload=static_payload(analysis_type),
            dataset=dataset or None,
        )
        await self.result_repository.save(result)

        logger.info(f"Produced {analysis_type} result {result.id} for {stored.path}")
        return to_result_response(result)
