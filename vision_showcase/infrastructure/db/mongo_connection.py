# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import get_settings


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def close_database() -> None:
    """Close the shared client, if one was opened."""
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None


def get_result_collection() -> AsyncIOMotorCollection:
    """
    Get analysis results collection from MongoDB

    Returns:
        MongoDB collection for analysis results
    """
    return get_database()["results"]


def get_training_sample_collection() -> AsyncIOMotorCollection:
    """
    Get training samples collection from MongoDB

    Returns:
        MongoDB collection for feedback training samples
    """
    return get_database()["training_samples"]


def get_model_performance_collection() -> AsyncIOMotorCollection:
    """
    Get model performance collection from MongoDB

    Returns:
        MongoDB collection for per-model accuracy bookkeeping
    """
    return get_database()["model_performance"]


def get_feedback_weight_collection() -> AsyncIOMotorCollection:
    """
    Get feedback weights collection from MongoDB

    Returns:
        MongoDB collection for learned confidence weights
    """
    return get_database()["feedback_weights"]


def get_dataset_collection() -> AsyncIOMotorCollection:
    """
    Get dataset configurations collection from MongoDB

    Returns:
        MongoDB collection for dataset configurations
    """
    return get_database()["datasets"]


def get_chat_message_collection() -> AsyncIOMotorCollection:
    """
    Get chat messages collection from MongoDB

    Returns:
        MongoDB collection for chat history
    """
    return get_database()["chat_messages"]
