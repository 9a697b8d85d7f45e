# Standard library imports
from typing import Dict

# External package imports
from fastapi import APIRouter, status

# Local application imports
from ...application.dto.training_dto import (
    AdjustPredictionsRequest,
    AdjustPredictionsResponse,
    FeedbackRequest,
    FeedbackResponse,
    FineTuneRequest,
    FineTuneResponse,
    TrainingExportResponse,
    TrainingStatsResponse,
)
from ...application.use_cases.training.adjust_predictions import AdjustPredictionsUseCase
from ...application.use_cases.training.fine_tune_model import FineTuneModelUseCase
from ...application.use_cases.training.get_training_stats import GetTrainingStatsUseCase
from ...application.use_cases.training.manage_training_data import (
    ClearTrainingDataUseCase,
    ExportTrainingDataUseCase,
)
from ...application.use_cases.training.submit_feedback import SubmitFeedbackUseCase
from ...di.container import get_container
from .errors import to_http_exception


router = APIRouter(tags=["training"])


@router.post(
    "/feedback",
    response_model=FeedbackResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def submit_feedback(request: FeedbackRequest) -> FeedbackResponse:
    """
    Submit feedback on a set of predictions

    Args:
        request: Predictions, the user's feedback and image metadata

    Returns:
        FeedbackResponse with the stored sample id, the new sample count and
        the auto fine-tune outcome when one ran
    """
    container = get_container()
    submit_feedback_use_case = container.get(SubmitFeedbackUseCase)

    try:
        return await submit_feedback_use_case.execute(request=request)
    except Exception as exception:
        raise to_http_exception(exception)


@router.get("/stats", response_model=TrainingStatsResponse)
async def get_training_stats() -> TrainingStatsResponse:
    container = get_container()
    get_stats_use_case = container.get(GetTrainingStatsUseCase)

    try:
        return await get_stats_use_case.execute()
    except Exception as exception:
        raise to_http_exception(exception)


@router.post("/fine-tune", response_model=FineTuneResponse)
async def fine_tune_model(request: FineTuneRequest) -> FineTuneResponse:
    """Fine-tune the named model, or every tracked model when `model` is omitted"""
    container = get_container()
    fine_tune_use_case = container.get(FineTuneModelUseCase)

    try:
        return await fine_tune_use_case.execute(model_name=request.model)
    except Exception as exception:
        raise to_http_exception(exception)


@router.post("/predictions/adjust", response_model=AdjustPredictionsResponse, response_model_exclude_none=True)
async def adjust_predictions(request: AdjustPredictionsRequest) -> AdjustPredictionsResponse:
    container = get_container()
    adjust_use_case = container.get(AdjustPredictionsUseCase)

    try:
        return await adjust_use_case.execute(request=request)
    except Exception as exception:
        raise to_http_exception(exception)


@router.delete("/data")
async def clear_training_data() -> Dict[str, str]:
    container = get_container()
    clear_use_case = container.get(ClearTrainingDataUseCase)

    try:
        await clear_use_case.execute()
    except Exception as exception:
        raise to_http_exception(exception)
    return {"status": "cleared"}


@router.get("/export", response_model=TrainingExportResponse)
async def export_training_data() -> TrainingExportResponse:
    container = get_container()
    export_use_case = container.get(ExportTrainingDataUseCase)

    try:
        return await export_use_case.execute()
    except Exception as exception:
        raise to_http_exception(exception)
