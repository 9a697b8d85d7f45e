from .result_repository import ResultRepository
from .training_repository import TrainingRepository
from .dataset_repository import DatasetRepository
from .chat_repository import ChatRepository

__all__ = ["ResultRepository", "TrainingRepository", "DatasetRepository", "ChatRepository"]
