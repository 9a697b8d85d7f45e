"""Use cases for reading the dataset registry."""
from typing import List

from ...dto.dataset_dto import DatasetConfigResponse
from ...services.dataset_manager import DatasetManagerService
from .dataset_mapping import to_dataset_response


class ListDatasetsUseCase:
    def __init__(self, dataset_manager: DatasetManagerService) -> None:
        self.dataset_manager = dataset_manager

    async def execute(self) -> List[DatasetConfigResponse]:
        datasets = await self.dataset_manager.list_datasets()
        return [to_dataset_response(config) for config in datasets]


class GetDatasetUseCase:
    def __init__(self, dataset_manager: DatasetManagerService) -> None:
        self.dataset_manager = dataset_manager

    async def execute(self, name: str) -> DatasetConfigResponse:
        return to_dataset_response(await self.dataset_manager.get_dataset(name))
