"""Training job API: start and control simulated training runs, stream their progress."""

# Standard library imports
import logging
from typing import List

# External package imports
from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status

# Local application imports
from ...application.dto.training_dto import (
    SystemStatsResponse,
    TrainingJobCreateRequest,
    TrainingJobResponse,
)
from ...application.use_cases.training.start_training_job import StartTrainingJobUseCase
from ...application.use_cases.training.training_jobs import (
    ControlTrainingJobUseCase,
    GetSystemStatsUseCase,
    GetTrainingJobUseCase,
    ListTrainingJobsUseCase,
)
from ...core.exceptions import TrainingJobNotFoundError
from ...di.container import get_container
from ...infrastructure.notifications.websocket_manager import WebSocketManager
from .errors import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(tags=["training-jobs"])


@router.post(
    "/jobs",
    response_model=TrainingJobResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_202_ACCEPTED,
)
async def start_training_job(request: TrainingJobCreateRequest) -> TrainingJobResponse:
    """
    Start a simulated training run on a registered dataset

    The run continues in the background; poll the job or subscribe to its
    WebSocket for progress.

    Args:
        request: Dataset, model and optional hyperparameters

    Returns:
        TrainingJobResponse in `pending` status
    """
    container = get_container()
    start_use_case = container.get(StartTrainingJobUseCase)

    try:
        return await start_use_case.execute(request=request)
    except Exception as exception:
        raise to_http_exception(exception)


@router.get("/jobs", response_model=List[TrainingJobResponse], response_model_exclude_none=True)
async def list_training_jobs() -> List[TrainingJobResponse]:
    container = get_container()
    return await container.get(ListTrainingJobsUseCase).execute()


@router.get("/jobs/{job_id}", response_model=TrainingJobResponse, response_model_exclude_none=True)
async def get_training_job(job_id: str) -> TrainingJobResponse:
    container = get_container()
    get_job_use_case = container.get(GetTrainingJobUseCase)

    try:
        return await get_job_use_case.execute(job_id=job_id)
    except Exception as exception:
        raise to_http_exception(exception)


async def _control_job(job_id: str, action: str) -> TrainingJobResponse:
    container = get_container()
    control_use_case = container.get(ControlTrainingJobUseCase)

    try:
        return await control_use_case.execute(job_id=job_id, action=action)
    except Exception as exception:
        raise to_http_exception(exception)


@router.post("/jobs/{job_id}/pause", response_model=TrainingJobResponse, response_model_exclude_none=True)
async def pause_training_job(job_id: str) -> TrainingJobResponse:
    return await _control_job(job_id, "pause")


@router.post("/jobs/{job_id}/resume", response_model=TrainingJobResponse, response_model_exclude_none=True)
async def resume_training_job(job_id: str) -> TrainingJobResponse:
    return await _control_job(job_id, "resume")


@router.post("/jobs/{job_id}/stop", response_model=TrainingJobResponse, response_model_exclude_none=True)
async def stop_training_job(job_id: str) -> TrainingJobResponse:
    return await _control_job(job_id, "stop")


@router.get("/system", response_model=SystemStatsResponse)
async def get_system_stats() -> SystemStatsResponse:
    """Simulated host utilisation; GPU load is high while a job is training"""
    container = get_container()
    return await container.get(GetSystemStatsUseCase).execute()


@router.websocket("/jobs/{job_id}/ws")
async def training_job_progress(websocket: WebSocket, job_id: str):
    """
    WebSocket endpoint streaming a training job's progress.

    On connect the client receives the job's current state, then a
    `progress` message per batch and a `status` message on every status
    change.

    Example connection:
        ws://host/api/training/jobs/<job_id>/ws
    """
    container = get_container()
    manager = container.get(WebSocketManager)

    try:
        job = await container.get(GetTrainingJobUseCase).execute(job_id=job_id)
    except TrainingJobNotFoundError:
        await websocket.close(code=1008, reason="Training job not found")
        return

    await websocket.accept()
    logger.info(f"WebSocket connection accepted for training job {job_id}")

    try:
        await manager.add_connection(job_id, websocket)

        await websocket.send_json({
            "type": "connection_established",
            "jobId": job_id,
            "job": job.model_dump(mode="json", by_alias=True, exclude_none=True),
        })

        # Keep connection alive and answer keep-alive pings
        while True:
            try:
                message = await websocket.receive_text()
                if message == "ping":
                    await websocket.send_text("pong")
                elif message != "pong":
                    logger.debug(f"Received message on training job {job_id} socket: {message}")
            except WebSocketDisconnect:
                logger.info(f"WebSocket disconnected for training job {job_id}")
                break
    finally:
        await manager.remove_connection(job_id, websocket)
