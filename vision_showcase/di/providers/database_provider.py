from typing import TYPE_CHECKING

from ...core.config import get_settings
from ...infrastructure.db.mongo_connection import (
    get_database,
    get_result_collection,
    get_training_sample_collection,
    get_model_performance_collection,
    get_feedback_weight_collection,
    get_dataset_collection,
    get_chat_message_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer

STORAGE_BACKEND_MONGO = "mongo"


class DatabaseProvider:
    """Registers MongoDB collections when the mongo storage backend is selected"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        if get_settings().storage_backend != STORAGE_BACKEND_MONGO:
            return

        container.register_singleton("database", get_database())
        container.register_singleton("result_collection", get_result_collection())
        container.register_singleton("training_sample_collection", get_training_sample_collection())
        container.register_singleton("model_performance_collection", get_model_performance_collection())
        container.register_singleton("feedback_weight_collection", get_feedback_weight_collection())
        container.register_singleton("dataset_collection", get_dataset_collection())
        container.register_singleton("chat_message_collection", get_chat_message_collection())
