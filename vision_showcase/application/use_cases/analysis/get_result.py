"""Use case for getting one analysis result."""
from ....core.exceptions import ResultNotFoundError
from ....domain.repositories.result_repository import ResultRepository
from ...dto.analysis_dto import AnalysisResultResponse
from .result_mapping import to_result_response


class GetResultUseCase:
    def __init__(self, result_repository: ResultRepository) -> None:
        self.result_repository = result_repository

    async def execute(self, result_id: int) -> AnalysisResultResponse:
        result = await self.result_repository.find_by_id(result_id)
        if result is None:
            raise ResultNotFoundError(result_id)
        return to_result_response(result)
