from typing import TYPE_CHECKING

from ...application.services.dataset_manager import DatasetManagerService
from ...application.use_cases.dataset.list_datasets import GetDatasetUseCase, ListDatasetsUseCase
from ...application.use_cases.dataset.load_dataset_batch import LoadDatasetBatchUseCase
from ...application.use_cases.dataset.load_popular_datasets import LoadPopularDatasetsUseCase
from ...application.use_cases.dataset.register_dataset import RegisterDatasetUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatasetProvider:
    """Dataset registry use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        for use_case in (
            RegisterDatasetUseCase,
            ListDatasetsUseCase,
            GetDatasetUseCase,
            LoadPopularDatasetsUseCase,
            LoadDatasetBatchUseCase,
        ):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(dataset_manager=container.get(DatasetManagerService)),
            )
