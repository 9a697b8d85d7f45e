"""Use case for registering a training dataset."""
import logging

from ....core.exceptions import ValidationError
from ...dto.dataset_dto import DatasetConfigResponse, DatasetRegisterRequest
from ...services.dataset_manager import DatasetManagerService
from .dataset_mapping import to_dataset_response

logger = logging.getLogger(__name__)


class RegisterDatasetUseCase:
    """Registers a dataset with default split, augmentation and preprocessing settings"""

    def __init__(self, dataset_manager: DatasetManagerService) -> None:
        self.dataset_manager = dataset_manager

    async def execute(self, request: DatasetRegisterRequest) -> DatasetConfigResponse:
        """
        Register or replace a dataset.

        Raises:
            ValidationError: If the domain model rejects the request
        """
        try:
            config = await self.dataset_manager.register_dataset(
                request.name.strip(),
                request.total_images,
                request.categories,
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e
        return to_dataset_response(config)
