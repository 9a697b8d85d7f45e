from abc import ABC, abstractmethod
from typing import Optional, List
from ..models.analysis_result import AnalysisResult


class ResultRepository(ABC):
    """Repository interface - defines contract for analysis result storage"""

    @abstractmethod
    async def save(self, result: AnalysisResult) -> AnalysisResult:
        """Append a result"""
        pass

    @abstractmethod
    async def find_by_id(self, result_id: int) -> Optional[AnalysisResult]:
        """Find result by ID"""
        pass

    @abstractmethod
    async def find_all(self, result_type: Optional[str] = None) -> List[AnalysisResult]:
        """List results in insertion order, optionally filtered by type"""
        pass

    @abstractmethod
    async def clear(self) -> int:
        """Delete every result and return how many were removed"""
        pass
