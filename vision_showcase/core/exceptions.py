"""
Custom exception hierarchy for the vision showcase backend.

Raised by services and use cases, translated to HTTP responses by the API
layer. Every exception carries a user-facing message that is safe to return.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class VisionShowcaseError(Exception):
    """Base exception for all showcase errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class ValidationError(VisionShowcaseError):
    """Raised when request data fails validation."""
    pass


class InvalidUploadError(ValidationError):
    """Raised when an uploaded file is missing, has a bad extension or is not an image."""
    pass


class UploadTooLargeError(ValidationError):
    """Raised when an upload exceeds the configured size limit."""

    def __init__(self, max_mb: int):
        super().__init__(
            f"Upload exceeds {max_mb} MB",
            user_message=f"File too large. Max {max_mb} MB.",
            details={"max_mb": max_mb},
        )
        self.max_mb = max_mb


# -----------------------------------------------------------------------------
# Lookup
# -----------------------------------------------------------------------------


class NotFoundError(VisionShowcaseError):
    """Base exception for missing entities."""
    pass


class DatasetNotFoundError(NotFoundError):
    """Raised when a dataset name is not registered."""

    def __init__(self, dataset_name: str):
        super().__init__(
            f"Dataset {dataset_name} not found",
            details={"dataset": dataset_name},
        )
        self.dataset_name = dataset_name


class ModelNotFoundError(NotFoundError):
    """Raised when a model key is not in the catalog."""

    def __init__(self, model_key: str):
        super().__init__(
            f"Model {model_key} not found",
            details={"model": model_key},
        )
        self.model_key = model_key


class ResultNotFoundError(NotFoundError):
    """Raised when an analysis result id is unknown."""

    def __init__(self, result_id: int):
        super().__init__(
            f"Result {result_id} not found",
            details={"result_id": result_id},
        )
        self.result_id = result_id


class TrainingJobNotFoundError(NotFoundError):
    """Raised when a training job id is unknown."""

    def __init__(self, job_id: str):
        super().__init__(
            f"Training job {job_id} not found",
            details={"job_id": job_id},
        )
        self.job_id = job_id


# -----------------------------------------------------------------------------
# Training
# -----------------------------------------------------------------------------


class TrainingError(VisionShowcaseError):
    """Base exception for training simulation errors."""
    pass


class TrainingJobStateError(TrainingError):
    """Raised when a job action does not fit the job's current status."""

    def __init__(self, job_id: str, status: str, action: str):
        super().__init__(
            f"Cannot {action} training job {job_id} in status {status}",
            details={"job_id": job_id, "status": status, "action": action},
        )
        self.job_id = job_id
        self.status = status
        self.action = action


# -----------------------------------------------------------------------------
# Repository
# -----------------------------------------------------------------------------


class RepositoryError(VisionShowcaseError):
    """Raised when the storage backend fails."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        super().__init__(
            message,
            user_message="Storage operation failed. Please try again.",
            **kwargs,
        )
        self.operation = operation


# -----------------------------------------------------------------------------
# Safe user-facing message
# -----------------------------------------------------------------------------

def get_user_message(exc: BaseException) -> str:
    """
    Return a safe, user-facing message for any exception.
    Use this at API boundaries so internal details are never exposed.
    """
    if isinstance(exc, VisionShowcaseError) and getattr(exc, "user_message", None):
        return exc.user_message
    return "Something went wrong. Please try again."
