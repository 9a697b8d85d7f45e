from abc import ABC, abstractmethod
from typing import Dict, List
from ..models.training import TrainingSample, ModelPerformance


class TrainingRepository(ABC):
    """Repository interface - persistence for feedback samples, model performance and learned weights"""

    @abstractmethod
    async def save_sample(self, sample: TrainingSample) -> TrainingSample:
        """Store a training sample"""
        pass

    @abstractmethod
    async def list_samples(self) -> List[TrainingSample]:
        """All training samples in insertion order"""
        pass

    @abstractmethod
    async def save_performance(self, performance: ModelPerformance) -> ModelPerformance:
        """Create or replace the performance record for a model"""
        pass

    @abstractmethod
    async def list_performance(self) -> List[ModelPerformance]:
        """All performance records"""
        pass

    @abstractmethod
    async def save_weights(self, weights: Dict[str, float]) -> None:
        """Create or replace learned weights, keyed "<model>_<class>" """
        pass

    @abstractmethod
    async def get_weights(self) -> Dict[str, float]:
        """All learned weights"""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove samples, performance records and weights"""
        pass
