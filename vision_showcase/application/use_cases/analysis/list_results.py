"""Use case for listing analysis results."""
from typing import List, Optional

from ....domain.repositories.result_repository import ResultRepository
from ...dto.analysis_dto import AnalysisResultResponse
from .result_mapping import to_result_response


class ListResultsUseCase:
    """Use case for listing stored results in insertion order"""

    def __init__(self, result_repository: ResultRepository) -> None:
        self.result_repository = result_repository

    async def execute(self, result_type: Optional[str] = None) -> List[AnalysisResultResponse]:
        results = await self.result_repository.find_all(result_type)
        return [to_result_response(result) for result in results]
