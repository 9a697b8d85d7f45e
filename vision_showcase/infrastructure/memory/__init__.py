from .in_memory_repositories import (
    InMemoryResultRepository,
    InMemoryTrainingRepository,
    InMemoryDatasetRepository,
    InMemoryChatRepository,
)

__all__ = [
    "InMemoryResultRepository",
    "InMemoryTrainingRepository",
    "InMemoryDatasetRepository",
    "InMemoryChatRepository",
]
