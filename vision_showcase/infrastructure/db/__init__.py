from .mongo_connection import (
    get_database,
    close_database,
    get_result_collection,
    get_training_sample_collection,
    get_model_performance_collection,
    get_feedback_weight_collection,
    get_dataset_collection,
    get_chat_message_collection,
)
from .mongo_result_repository import MongoResultRepository
from .mongo_training_repository import MongoTrainingRepository
from .mongo_dataset_repository import MongoDatasetRepository
from .mongo_chat_repository import MongoChatRepository

__all__ = [
    "get_database",
    "close_database",
    "get_result_collection",
    "get_training_sample_collection",
    "get_model_performance_collection",
    "get_feedback_weight_collection",
    "get_dataset_collection",
    "get_chat_message_collection",
    "MongoResultRepository",
    "MongoTrainingRepository",
    "MongoDatasetRepository",
    "MongoChatRepository",
]
