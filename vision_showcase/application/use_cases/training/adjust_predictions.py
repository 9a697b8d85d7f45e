"""Use case for adjusting client-side predictions with what the system has learned."""
from ...dto.training_dto import AdjustedPrediction, AdjustPredictionsRequest, AdjustPredictionsResponse
from ...services.training_system import TrainingSystemService


class AdjustPredictionsUseCase:
    """
    Applies the dynamic confidence adjustment and the learned class weights,
    then drops predictions under the threshold.
    """

    def __init__(self, training_system: TrainingSystemService) -> None:
        self.training_system = training_system

    async def execute(self, request: AdjustPredictionsRequest) -> AdjustPredictionsResponse:
        base = [
            {
                "class": prediction.class_name,
                "confidence": prediction.confidence,
                "model": prediction.model or request.model,
            }
            for prediction in request.predictions
        ]
        adjusted = await self.training_system.generate_dynamic_predictions(base, request.model)
        adjusted = await self.training_system.apply_learned_weights(adjusted, request.model)

        return AdjustPredictionsResponse(
            model=request.model,
            predictions=[
                AdjustedPrediction(
                    class_name=prediction["class"],
                    confidence=prediction["confidence"],
                    rank=prediction["rank"],
                    model_accuracy=prediction["model_accuracy"],
                    training_data_points=prediction["training_data_points"],
                    is_learned=prediction["is_learned"],
                    model=prediction["model"],
                )
                for prediction in adjusted
                if prediction["confidence"] >= request.threshold
            ],
        )
