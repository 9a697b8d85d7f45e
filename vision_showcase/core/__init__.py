from .config import Settings, get_settings, reset_settings
from .exceptions import (
    VisionShowcaseError,
    ValidationError,
    InvalidUploadError,
    UploadTooLargeError,
    NotFoundError,
    DatasetNotFoundError,
    ModelNotFoundError,
    ResultNotFoundError,
    TrainingJobNotFoundError,
    TrainingError,
    TrainingJobStateError,
    RepositoryError,
    get_user_message,
)

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "VisionShowcaseError",
    "ValidationError",
    "InvalidUploadError",
    "UploadTooLargeError",
    "NotFoundError",
    "DatasetNotFoundError",
    "ModelNotFoundError",
    "ResultNotFoundError",
    "TrainingJobNotFoundError",
    "TrainingError",
    "TrainingJobStateError",
    "RepositoryError",
    "get_user_message",
]
