from .register_dataset import RegisterDatasetUseCase
from .list_datasets import ListDatasetsUseCase, GetDatasetUseCase
from .load_popular_datasets import LoadPopularDatasetsUseCase
from .load_dataset_batch import LoadDatasetBatchUseCase

__all__ = [
    "RegisterDatasetUseCase",
    "ListDatasetsUseCase",
    "GetDatasetUseCase",
    "LoadPopularDatasetsUseCase",
    "LoadDatasetBatchUseCase",
]
