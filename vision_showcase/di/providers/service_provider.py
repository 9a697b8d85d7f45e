from typing import TYPE_CHECKING

from ...application.services.chat_assistant import ChatAssistantService
from ...application.services.dataset_manager import DatasetManagerService
from ...application.services.training_jobs import MillionImageTrainer, TrainingJobService
from ...application.services.training_system import TrainingSystemService
from ...domain.repositories.chat_repository import ChatRepository
from ...domain.repositories.dataset_repository import DatasetRepository
from ...domain.repositories.training_repository import TrainingRepository
from ...infrastructure.notifications.websocket_manager import WebSocketManager
from ...infrastructure.storage.upload_storage import UploadStorage
from ...processing.models.manager import ModelManager
from ...utils.datetime_utils import MonotonicMillis

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ServiceProvider:
    """
    Registers the stateful services as singletons.

    They hold process-wide state (model cache, training bookkeeping, running
    jobs, chat context), so every use case must share the same instance.
    """

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(UploadStorage, UploadStorage())
        container.register_singleton(MonotonicMillis, MonotonicMillis())
        container.register_singleton(ModelManager, ModelManager())
        container.register_singleton(WebSocketManager, WebSocketManager())

        training_system = TrainingSystemService(training_repository=container.get(TrainingRepository))
        container.register_singleton(TrainingSystemService, training_system)

        dataset_manager = DatasetManagerService(dataset_repository=container.get(DatasetRepository))
        container.register_singleton(DatasetManagerService, dataset_manager)

        container.register_singleton(
            TrainingJobService,
            TrainingJobService(
                trainer=MillionImageTrainer(dataset_manager=dataset_manager),
                websocket_manager=container.get(WebSocketManager),
            ),
        )

        container.register_singleton(
            ChatAssistantService,
            ChatAssistantService(
                chat_repository=container.get(ChatRepository),
                training_system=training_system,
            ),
        )
