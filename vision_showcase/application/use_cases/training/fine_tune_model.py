"""Use case for fine-tuning one or every tracked model."""
from typing import Optional

from ...dto.training_dto import FineTuneResponse, FineTuneResult
from ...services.training_system import TrainingSystemService


class FineTuneModelUseCase:
    def __init__(self, training_system: TrainingSystemService) -> None:
        self.training_system = training_system

    async def execute(self, model_name: Optional[str] = None) -> FineTuneResponse:
        """Fine-tune the named model, or every tracked model when none is named."""
        models = [model_name] if model_name else await self.training_system.tracked_models()
        results = [
            FineTuneResult(**await self.training_system.fine_tune_model(name))
            for name in models
        ]
        return FineTuneResponse(results=results)
