"""Mapping between AnalysisResult domain models and response DTOs."""
from ....domain.models.analysis_result import AnalysisResult
from ....utils.datetime_utils import to_iso
from ...dto.analysis_dto import AnalysisResultResponse


def to_result_response(result: AnalysisResult) -> AnalysisResultResponse:
    return AnalysisResultResponse(
        id=result.id,
        type=result.type,
        dataset=result.dataset,
        image_path=result.image_path,
        timestamp=to_iso(result.timestamp),
        model=result.model,
        processing_time=result.processing_time_ms,
        **result.payload,
    )
