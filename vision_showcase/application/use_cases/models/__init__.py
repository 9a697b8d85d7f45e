from .list_models import ListModelsUseCase
from .get_benchmarks import GetBenchmarksUseCase

__all__ = ["ListModelsUseCase", "GetBenchmarksUseCase"]
