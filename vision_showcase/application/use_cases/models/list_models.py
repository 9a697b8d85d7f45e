"""Use case for listing the model catalog."""
from typing import List

from ....processing.models.manager import ModelManager
from ...dto.model_dto import ModelInfoResponse


class ListModelsUseCase:
    def __init__(self, model_manager: ModelManager) -> None:
        self.model_manager = model_manager

    async def execute(self) -> List[ModelInfoResponse]:
        return [ModelInfoResponse(**info) for info in self.model_manager.list_models()]
