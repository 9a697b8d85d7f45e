"""Mapping between TrainingJob domain models and response DTOs."""
from dataclasses import asdict

from ....domain.models.training import TrainingJob
from ...dto.training_dto import TrainingConfigSchema, TrainingJobResponse, TrainingProgress


def to_job_response(job: TrainingJob) -> TrainingJobResponse:
    return TrainingJobResponse(
        id=job.id,
        dataset=job.dataset_name,
        model=job.model_name,
        status=job.status.value,
        config=TrainingConfigSchema(**asdict(job.config)),
        progress=TrainingProgress.model_validate(job.progress) if job.progress else None,
        checkpoints=list(job.checkpoints),
        created_at=job.created_at,
        started_at=job.started_at,
        finished_at=job.finished_at,
        error=job.error,
    )
