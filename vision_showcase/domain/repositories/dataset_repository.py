from abc import ABC, abstractmethod
from typing import Optional, List
from ..models.dataset import DatasetConfig


class DatasetRepository(ABC):
    """Repository interface - defines contract for dataset configuration storage"""

    @abstractmethod
    async def save(self, config: DatasetConfig) -> DatasetConfig:
        """Create or replace a dataset configuration (keyed by name)"""
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[DatasetConfig]:
        """Find dataset configuration by name"""
        pass

    @abstractmethod
    async def find_all(self) -> List[DatasetConfig]:
        """All dataset configurations in registration order"""
        pass
