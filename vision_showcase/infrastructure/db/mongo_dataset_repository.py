# Standard library imports
from dataclasses import asdict
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import RepositoryError
from ...domain.repositories.dataset_repository import DatasetRepository
from ...domain.models.dataset import (
    AugmentationConfig,
    DatasetConfig,
    PreprocessingConfig,
    SplitRatio,
)
from ...domain.constants import DatasetFields
from .mongo_connection import get_dataset_collection


class MongoDatasetRepository(DatasetRepository):
    """MongoDB implementation of DatasetRepository"""

    def __init__(self, dataset_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.dataset_collection = dataset_collection if dataset_collection is not None else get_dataset_collection()

    async def save(self, config: DatasetConfig) -> DatasetConfig:
        """
        Create or replace a dataset configuration

        Args:
            config: DatasetConfig domain model

        Returns:
            The stored DatasetConfig
        """
        if not config:
            raise ValueError("Dataset config cannot be None")

        try:
            await self.dataset_collection.replace_one(
                {DatasetFields.NAME: config.name},
                self._config_to_dict(config),
                upsert=True,
            )
            return config
        except PyMongoError as e:
            raise RepositoryError(f"Error saving dataset config: {str(e)}", operation="save")

    async def find_by_name(self, name: str) -> Optional[DatasetConfig]:
        if not name:
            return None

        try:
            document = await self.dataset_collection.find_one({DatasetFields.NAME: name})
        except PyMongoError as e:
            raise RepositoryError(f"Error finding dataset config: {str(e)}", operation="find_by_name")

        if document is None:
            return None
        return self._document_to_config(document)

    async def find_all(self) -> List[DatasetConfig]:
        try:
            cursor = self.dataset_collection.find({}).sort(DatasetFields.MONGO_ID, ASCENDING)
            configs = []
            async for document in cursor:
                configs.append(self._document_to_config(document))
            return configs
        except PyMongoError as e:
            raise RepositoryError(f"Error listing dataset configs: {str(e)}", operation="find_all")

    def _config_to_dict(self, config: DatasetConfig) -> Dict[str, Any]:
        return {
            DatasetFields.NAME: config.name,
            DatasetFields.VERSION: config.version,
            DatasetFields.TOTAL_IMAGES: config.total_images,
            DatasetFields.CATEGORIES: list(config.categories),
            DatasetFields.SPLIT_RATIO: asdict(config.split_ratio),
            DatasetFields.AUGMENTATION_CONFIG: asdict(config.augmentation_config),
            DatasetFields.PREPROCESSING: asdict(config.preprocessing),
        }

    def _document_to_config(self, document: Dict[str, Any]) -> DatasetConfig:
        return DatasetConfig(
            name=document[DatasetFields.NAME],
            version=document.get(DatasetFields.VERSION, "1.0.0"),
            total_images=int(document.get(DatasetFields.TOTAL_IMAGES, 0)),
            categories=list(document.get(DatasetFields.CATEGORIES) or []),
            split_ratio=SplitRatio(**(document.get(DatasetFields.SPLIT_RATIO) or {})),
            augmentation_config=AugmentationConfig(**(document.get(DatasetFields.AUGMENTATION_CONFIG) or {})),
            preprocessing=PreprocessingConfig(**(document.get(DatasetFields.PREPROCESSING) or {})),
        )
