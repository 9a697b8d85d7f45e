"""Use cases for inspecting and controlling training jobs."""
from typing import List

from ....core.exceptions import ValidationError
from ...dto.training_dto import SystemStatsResponse, TrainingJobResponse
from ...services.training_jobs import TrainingJobService
from .job_mapping import to_job_response

JOB_ACTIONS = ("pause", "resume", "stop")


class ListTrainingJobsUseCase:
    def __init__(self, job_service: TrainingJobService) -> None:
        self.job_service = job_service

    async def execute(self) -> List[TrainingJobResponse]:
        return [to_job_response(job) for job in self.job_service.list_jobs()]


class GetTrainingJobUseCase:
    def __init__(self, job_service: TrainingJobService) -> None:
        self.job_service = job_service

    async def execute(self, job_id: str) -> TrainingJobResponse:
        return to_job_response(self.job_service.get_job(job_id))


class ControlTrainingJobUseCase:
    """Pause, resume or stop a job"""

    def __init__(self, job_service: TrainingJobService) -> None:
        self.job_service = job_service

    async def execute(self, job_id: str, action: str) -> TrainingJobResponse:
        """
        Raises:
            ValidationError: Unknown action
            TrainingJobNotFoundError: Unknown job
            TrainingJobStateError: The action is not allowed in the job's status
        """
        if action == "pause":
            job = await self.job_service.pause_job(job_id)
        elif action == "resume":
            job = await self.job_service.resume_job(job_id)
        elif action == "stop":
            job = await self.job_service.stop_job(job_id)
        else:
            raise ValidationError(f"Unknown job action: {action}")
        return to_job_response(job)


class GetSystemStatsUseCase:
    def __init__(self, job_service: TrainingJobService) -> None:
        self.job_service = job_service

    async def execute(self) -> SystemStatsResponse:
        return SystemStatsResponse(**self.job_service.system_stats())
