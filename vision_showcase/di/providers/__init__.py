from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .service_provider import ServiceProvider
from .analysis_provider import AnalysisProvider
from .dataset_provider import DatasetProvider
from .training_provider import TrainingProvider
from .chat_provider import ChatProvider
from .model_provider import ModelProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "ServiceProvider",
    "AnalysisProvider",
    "DatasetProvider",
    "TrainingProvider",
    "ChatProvider",
    "ModelProvider",
]
