# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    AnalysisProvider,
    ChatProvider,
    DatabaseProvider,
    DatasetProvider,
    ModelProvider,
    RepositoryProvider,
    ServiceProvider,
    TrainingProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider), only for the mongo backend
    2. Repositories (RepositoryProvider) - depends on database
    3. Stateful services (ServiceProvider) - depend on repositories
    4. Use cases - depend on services and repositories
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        ServiceProvider.register(self)

        AnalysisProvider.register(self)
        DatasetProvider.register(self)
        TrainingProvider.register(self)
        ChatProvider.register(self)
        ModelProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the global container; the next get_container() builds a fresh one."""
    global _container
    _container = None
