from typing import TYPE_CHECKING

from ...application.services.training_system import TrainingSystemService
from ...application.use_cases.analysis.analyze_image import AnalyzeImageUseCase
from ...application.use_cases.analysis.batch_process import BatchProcessUseCase
from ...application.use_cases.analysis.clear_results import ClearResultsUseCase
from ...application.use_cases.analysis.enhanced_classify import EnhancedClassifyUseCase
from ...application.use_cases.analysis.get_dataset_catalog import GetDatasetCatalogUseCase
from ...application.use_cases.analysis.get_result import GetResultUseCase
from ...application.use_cases.analysis.list_results import ListResultsUseCase
from ...domain.repositories.result_repository import ResultRepository
from ...infrastructure.storage.upload_storage import UploadStorage
from ...processing.models.manager import ModelManager
from ...utils.datetime_utils import MonotonicMillis

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AnalysisProvider:
    """Analysis use case provider - uploads, results and the dataset catalog"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            AnalyzeImageUseCase,
            lambda: AnalyzeImageUseCase(
                result_repository=container.get(ResultRepository),
                upload_storage=container.get(UploadStorage),
                id_generator=container.get(MonotonicMillis),
            ),
        )
        container.register_factory(
            EnhancedClassifyUseCase,
            lambda: EnhancedClassifyUseCase(
                result_repository=container.get(ResultRepository),
                upload_storage=container.get(UploadStorage),
                model_manager=container.get(ModelManager),
                training_system=container.get(TrainingSystemService),
                id_generator=container.get(MonotonicMillis),
            ),
        )
        container.register_factory(BatchProcessUseCase, lambda: BatchProcessUseCase())
        container.register_factory(
            ListResultsUseCase,
            lambda: ListResultsUseCase(result_repository=container.get(ResultRepository)),
        )
        container.register_factory(
            GetResultUseCase,
            lambda: GetResultUseCase(result_repository=container.get(ResultRepository)),
        )
        container.register_factory(
            ClearResultsUseCase,
            lambda: ClearResultsUseCase(result_repository=container.get(ResultRepository)),
        )
        container.register_factory(GetDatasetCatalogUseCase, lambda: GetDatasetCatalogUseCase())
