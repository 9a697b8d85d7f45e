from .training_system import TrainingSystemService
from .dataset_manager import DatasetManagerService
from .training_jobs import MillionImageTrainer, TrainingJobService, JobControl, TrainingCancelled
from .chat_assistant import ChatAssistantService

__all__ = [
    "TrainingSystemService",
    "DatasetManagerService",
    "MillionImageTrainer",
    "TrainingJobService",
    "JobControl",
    "TrainingCancelled",
    "ChatAssistantService",
]
