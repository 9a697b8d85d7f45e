# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Query

# Local application imports
from ...application.dto.model_dto import BenchmarksResponse, ModelInfoResponse
from ...application.use_cases.models.get_benchmarks import GetBenchmarksUseCase
from ...application.use_cases.models.list_models import ListModelsUseCase
from ...di.container import get_container
from .errors import to_http_exception


router = APIRouter(tags=["models"])


@router.get("", response_model=List[ModelInfoResponse])
async def list_models() -> List[ModelInfoResponse]:
    """Model catalog with a flag telling whether each model is loaded"""
    container = get_container()
    return await container.get(ListModelsUseCase).execute()


@router.get("/benchmarks", response_model=BenchmarksResponse)
async def get_benchmarks(
    metric: str = Query("accuracy", description="accuracy, speed, size, memory or fps"),
) -> BenchmarksResponse:
    container = get_container()
    benchmarks_use_case = container.get(GetBenchmarksUseCase)

    try:
        return await benchmarks_use_case.execute(metric=metric)
    except Exception as exception:
        raise to_http_exception(exception)
