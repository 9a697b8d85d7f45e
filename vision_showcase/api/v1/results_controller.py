# Standard library imports
from typing import Dict, List, Optional

# External package imports
from fastapi import APIRouter, Query

# Local application imports
from ...application.dto.analysis_dto import AnalysisResultResponse
from ...application.use_cases.analysis.clear_results import ClearResultsUseCase
from ...application.use_cases.analysis.get_result import GetResultUseCase
from ...application.use_cases.analysis.list_results import ListResultsUseCase
from ...di.container import get_container
from .errors import to_http_exception


router = APIRouter(tags=["results"])


@router.get("", response_model=List[AnalysisResultResponse], response_model_exclude_none=True)
async def list_results(
    type: Optional[str] = Query(None, description="Only return results of this analysis type"),
) -> List[AnalysisResultResponse]:
    """
    List analysis results in the order they were produced

    Args:
        type: Optional analysis type filter

    Returns:
        List of AnalysisResultResponse objects
    """
    container = get_container()
    list_results_use_case = container.get(ListResultsUseCase)

    try:
        return await list_results_use_case.execute(result_type=type)
    except Exception as exception:
        raise to_http_exception(exception)


@router.get("/{result_id}", response_model=AnalysisResultResponse, response_model_exclude_none=True)
async def get_result(result_id: int) -> AnalysisResultResponse:
    container = get_container()
    get_result_use_case = container.get(GetResultUseCase)

    try:
        return await get_result_use_case.execute(result_id=result_id)
    except Exception as exception:
        raise to_http_exception(exception)


@router.delete("")
async def clear_results() -> Dict[str, int]:
    container = get_container()
    clear_results_use_case = container.get(ClearResultsUseCase)

    try:
        removed = await clear_results_use_case.execute()
    except Exception as exception:
        raise to_http_exception(exception)
    return {"removed": removed}
