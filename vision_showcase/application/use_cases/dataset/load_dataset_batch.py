"""Use case for loading (and optionally preprocessing) a dataset batch."""
import asyncio
import logging

from ....core.exceptions import ValidationError
from ...dto.dataset_dto import DatasetBatchResponse
from ...services.dataset_manager import DatasetManagerService
from .dataset_mapping import to_image_response

logger = logging.getLogger(__name__)

MAX_BATCH_SIZE = 1024


class LoadDatasetBatchUseCase:
    def __init__(self, dataset_manager: DatasetManagerService) -> None:
        self.dataset_manager = dataset_manager

    async def execute(
        self,
        dataset_name: str,
        batch_size: int = 32,
        start_index: int = 0,
        preprocess: bool = False,
    ) -> DatasetBatchResponse:
        """
        Load images [start_index, start_index + batch_size) of a dataset.

        With preprocess, each image is resized, normalized and augmented and
        the augmented copies are returned alongside the originals.

        Raises:
            ValidationError: Batch size or start index out of range
            DatasetNotFoundError: Unknown dataset
        """
        if batch_size < 1 or batch_size > MAX_BATCH_SIZE:
            raise ValidationError(f"Batch size must be between 1 and {MAX_BATCH_SIZE}")
        if start_index < 0:
            raise ValidationError("Start index cannot be negative")

        images = await self.dataset_manager.load_dataset_batch(dataset_name, batch_size, start_index)
        if preprocess and images:
            config = await self.dataset_manager.get_dataset(dataset_name)
            images = await asyncio.to_thread(self.dataset_manager.preprocess_batch, images, config)

        return DatasetBatchResponse(
            dataset=dataset_name,
            start_index=start_index,
            batch_size=batch_size,
            count=len(images),
            images=[to_image_response(image) for image in images],
        )
