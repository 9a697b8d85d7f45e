"""Use case for training statistics."""
from ...dto.training_dto import TrainingStatsResponse
from ...services.training_system import TrainingSystemService


class GetTrainingStatsUseCase:
    def __init__(self, training_system: TrainingSystemService) -> None:
        self.training_system = training_system

    async def execute(self) -> TrainingStatsResponse:
        return TrainingStatsResponse(**await self.training_system.get_training_stats())
