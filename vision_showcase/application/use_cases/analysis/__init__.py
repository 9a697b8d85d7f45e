from .analyze_image import AnalyzeImageUseCase
from .enhanced_classify import EnhancedClassifyUseCase
from .batch_process import BatchProcessUseCase
from .list_results import ListResultsUseCase
from .get_result import GetResultUseCase
from .clear_results import ClearResultsUseCase
from .get_dataset_catalog import GetDatasetCatalogUseCase, DATASET_CATALOG

__all__ = [
    "AnalyzeImageUseCase",
    "EnhancedClassifyUseCase",
    "BatchProcessUseCase",
    "ListResultsUseCase",
    "GetResultUseCase",
    "ClearResultsUseCase",
    "GetDatasetCatalogUseCase",
    "DATASET_CATALOG",
]
