import logging
from typing import TYPE_CHECKING

from ...core.config import get_settings
from ...domain.repositories.chat_repository import ChatRepository
from ...domain.repositories.dataset_repository import DatasetRepository
from ...domain.repositories.result_repository import ResultRepository
from ...domain.repositories.training_repository import TrainingRepository
from ...infrastructure.db.mongo_chat_repository import MongoChatRepository
from ...infrastructure.db.mongo_dataset_repository import MongoDatasetRepository
from ...infrastructure.db.mongo_result_repository import MongoResultRepository
from ...infrastructure.db.mongo_training_repository import MongoTrainingRepository
from ...infrastructure.memory.in_memory_repositories import (
    InMemoryChatRepository,
    InMemoryDatasetRepository,
    InMemoryResultRepository,
    InMemoryTrainingRepository,
)
from .database_provider import STORAGE_BACKEND_MONGO

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to the selected storage backend"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        backend = get_settings().storage_backend

        if backend == STORAGE_BACKEND_MONGO:
            container.register_singleton(
                ResultRepository,
                MongoResultRepository(result_collection=container.get("result_collection")),
            )
            container.register_singleton(
                TrainingRepository,
                MongoTrainingRepository(
                    sample_collection=container.get("training_sample_collection"),
                    performance_collection=container.get("model_performance_collection"),
                    weight_collection=container.get("feedback_weight_collection"),
                ),
            )
            container.register_singleton(
                DatasetRepository,
                MongoDatasetRepository(dataset_collection=container.get("dataset_collection")),
            )
            container.register_singleton(
                ChatRepository,
                MongoChatRepository(chat_collection=container.get("chat_message_collection")),
            )
        else:
            container.register_singleton(ResultRepository, InMemoryResultRepository())
            container.register_singleton(TrainingRepository, InMemoryTrainingRepository())
            container.register_singleton(DatasetRepository, InMemoryDatasetRepository())
            container.register_singleton(ChatRepository, InMemoryChatRepository())

        logger.info(f"Repositories registered with '{backend}' storage backend")
