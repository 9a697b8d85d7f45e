"""Use case for clearing the results history."""
import logging

from ....domain.repositories.result_repository import ResultRepository

logger = logging.getLogger(__name__)


class ClearResultsUseCase:
    def __init__(self, result_repository: ResultRepository) -> None:
        self.result_repository = result_repository

    async def execute(self) -> int:
        removed = await self.result_repository.clear()
        logger.info(f"Cleared {removed} results")
        return removed
