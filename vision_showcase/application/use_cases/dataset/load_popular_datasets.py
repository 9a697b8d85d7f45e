"""Use case for registering the built-in popular datasets."""
import logging
from typing import List

from ...dto.dataset_dto import DatasetConfigResponse
from ...services.dataset_manager import DatasetManagerService
from .dataset_mapping import to_dataset_response

logger = logging.getLogger(__name__)


class LoadPopularDatasetsUseCase:
    """Registers ImageNet, COCO, Open Images and CIFAR-100"""

    def __init__(self, dataset_manager: DatasetManagerService) -> None:
        self.dataset_manager = dataset_manager

    async def execute(self) -> List[DatasetConfigResponse]:
        datasets = await self.dataset_manager.load_popular_datasets()
        logger.info(f"Loaded {len(datasets)} popular datasets")
        return [to_dataset_response(config) for config in datasets]
