"""Use cases for exporting and clearing the feedback training data."""
from ...dto.training_dto import TrainingExportResponse
from ...services.training_system import TrainingSystemService


class ExportTrainingDataUseCase:
    def __init__(self, training_system: TrainingSystemService) -> None:
        self.training_system = training_system

    async def execute(self) -> TrainingExportResponse:
        return TrainingExportResponse(**await self.training_system.export_snapshot())


class ClearTrainingDataUseCase:
    def __init__(self, training_system: TrainingSystemService) -> None:
        self.training_system = training_system

    async def execute(self) -> None:
        await self.training_system.clear_training_data()
