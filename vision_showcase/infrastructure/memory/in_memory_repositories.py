"""
In-process repository implementations.

Used when STORAGE_BACKEND=memory (the default) and by the test-suite. State
lives for the lifetime of the process, like the browser storage the showcase
UI relied on. Objects are copied on the way in and out so callers never share
mutable state with the store.
"""

# Standard library imports
import asyncio
import copy
from collections import OrderedDict
from typing import Dict, List, Optional

# Local application imports
from ...domain.models.analysis_result import AnalysisResult
from ...domain.models.chat_message import ChatMessage
from ...domain.models.dataset import DatasetConfig
from ...domain.models.training import ModelPerformance, TrainingSample
from ...domain.repositories.chat_repository import ChatRepository
from ...domain.repositories.dataset_repository import DatasetRepository
from ...domain.repositories.result_repository import ResultRepository
from ...domain.repositories.training_repository import TrainingRepository


class InMemoryResultRepository(ResultRepository):
    """In-memory implementation of ResultRepository"""

    def __init__(self) -> None:
        self._results: List[AnalysisResult] = []
        self._lock = asyncio.Lock()

    async def save(self, result: AnalysisResult) -> AnalysisResult:
        if not result:
            raise ValueError("Result cannot be None")
        async with self._lock:
            self._results.append(copy.deepcopy(result))
        return result

    async def find_by_id(self, result_id: int) -> Optional[AnalysisResult]:
        for result in self._results:
            if result.id == result_id:
                return copy.deepcopy(result)
        return None

    async def find_all(self, result_type: Optional[str] = None) -> List[AnalysisResult]:
        return [
            copy.deepcopy(result)
            for result in self._results
            if result_type is None or result.type == result_type
        ]

    async def clear(self) -> int:
        async with self._lock:
            removed = len(self._results)
            self._results.clear()
        return removed


class InMemoryTrainingRepository(TrainingRepository):
    """In-memory implementation of TrainingRepository"""

    def __init__(self) -> None:
        self._samples: "OrderedDict[str, TrainingSample]" = OrderedDict()
        self._performance: Dict[str, ModelPerformance] = {}
        self._weights: Dict[str, float] = {}

    async def save_sample(self, sample: TrainingSample) -> TrainingSample:
        self._samples[sample.id] = copy.deepcopy(sample)
        return sample

    async def list_samples(self) -> List[TrainingSample]:
        return [copy.deepcopy(sample) for sample in self._samples.values()]

    async def save_performance(self, performance: ModelPerformance) -> ModelPerformance:
        self._performance[performance.model_name] = copy.deepcopy(performance)
        return performance

    async def list_performance(self) -> List[ModelPerformance]:
        return [copy.deepcopy(performance) for performance in self._performance.values()]

    async def save_weights(self, weights: Dict[str, float]) -> None:
        self._weights.update(weights)

    async def get_weights(self) -> Dict[str, float]:
        return dict(self._weights)

    async def clear(self) -> None:
        self._samples.clear()
        self._performance.clear()
        self._weights.clear()


class InMemoryDatasetRepository(DatasetRepository):
    """In-memory implementation of DatasetRepository"""

    def __init__(self) -> None:
        self._datasets: "OrderedDict[str, DatasetConfig]" = OrderedDict()

    async def save(self, config: DatasetConfig) -> DatasetConfig:
        if not config:
            raise ValueError("Dataset config cannot be None")
        self._datasets[config.name] = copy.deepcopy(config)
        return config

    async def find_by_name(self, name: str) -> Optional[DatasetConfig]:
        config = self._datasets.get(name)
        return copy.deepcopy(config) if config else None

    async def find_all(self) -> List[DatasetConfig]:
        return [copy.deepcopy(config) for config in self._datasets.values()]


class InMemoryChatRepository(ChatRepository):
    """In-memory implementation of ChatRepository"""

    def __init__(self) -> None:
        self._messages: List[ChatMessage] = []

    async def append(self, message: ChatMessage) -> ChatMessage:
        self._messages.append(copy.deepcopy(message))
        return message

    async def list_messages(self, limit: Optional[int] = None) -> List[ChatMessage]:
        if limit is None:
            messages = self._messages
        elif limit <= 0:
            messages = []
        else:
            messages = self._messages[-limit:]
        return [copy.deepcopy(message) for message in messages]

    async def clear(self) -> None:
        self._messages.clear()
