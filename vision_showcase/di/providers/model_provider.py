from typing import TYPE_CHECKING

from ...application.use_cases.models.get_benchmarks import GetBenchmarksUseCase
from ...application.use_cases.models.list_models import ListModelsUseCase
from ...processing.models.manager import ModelManager

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ModelProvider:
    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            ListModelsUseCase,
            lambda: ListModelsUseCase(model_manager=container.get(ModelManager)),
        )
        container.register_factory(GetBenchmarksUseCase, lambda: GetBenchmarksUseCase())
