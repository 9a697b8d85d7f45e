# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import RepositoryError
from ...domain.repositories.training_repository import TrainingRepository
from ...domain.models.training import (
    ModelPerformance,
    ModelPrediction,
    TrainingSample,
    UserFeedback,
)
from ...domain.constants import (
    FeedbackWeightFields,
    ModelPerformanceFields,
    TrainingSampleFields,
)
from .mongo_connection import (
    get_feedback_weight_collection,
    get_model_performance_collection,
    get_training_sample_collection,
)


class MongoTrainingRepository(TrainingRepository):
    """MongoDB implementation of TrainingRepository"""

    def __init__(
        self,
        sample_collection: Optional[AsyncIOMotorCollection] = None,
        performance_collection: Optional[AsyncIOMotorCollection] = None,
        weight_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        self.sample_collection = (
            sample_collection if sample_collection is not None else get_training_sample_collection()
        )
        self.performance_collection = (
            performance_collection if performance_collection is not None else get_model_performance_collection()
        )
        self.weight_collection = (
            weight_collection if weight_collection is not None else get_feedback_weight_collection()
        )

    async def save_sample(self, sample: TrainingSample) -> TrainingSample:
        try:
            await self.sample_collection.replace_one(
                {TrainingSampleFields.ID: sample.id},
                self._sample_to_dict(sample),
                upsert=True,
            )
            return sample
        except PyMongoError as e:
            raise RepositoryError(f"Error saving training sample: {str(e)}", operation="save_sample")

    async def list_samples(self) -> List[TrainingSample]:
        try:
            cursor = self.sample_collection.find({}).sort(TrainingSampleFields.MONGO_ID, ASCENDING)
            samples = []
            async for document in cursor:
                samples.append(self._document_to_sample(document))
            return samples
        except PyMongoError as e:
            raise RepositoryError(f"Error listing training samples: {str(e)}", operation="list_samples")

    async def save_performance(self, performance: ModelPerformance) -> ModelPerformance:
        try:
            await self.performance_collection.replace_one(
                {ModelPerformanceFields.MODEL_NAME: performance.model_name},
                self._performance_to_dict(performance),
                upsert=True,
            )
            return performance
        except PyMongoError as e:
            raise RepositoryError(f"Error saving model performance: {str(e)}", operation="save_performance")

    async def list_performance(self) -> List[ModelPerformance]:
        try:
            cursor = self.performance_collection.find({}).sort(ModelPerformanceFields.MONGO_ID, ASCENDING)
            records = []
            async for document in cursor:
                records.append(self._document_to_performance(document))
            return records
        except PyMongoError as e:
            raise RepositoryError(f"Error listing model performance: {str(e)}", operation="list_performance")

    async def save_weights(self, weights: Dict[str, float]) -> None:
        try:
            for key, weight in weights.items():
                await self.weight_collection.replace_one(
                    {FeedbackWeightFields.KEY: key},
                    {FeedbackWeightFields.KEY: key, FeedbackWeightFields.WEIGHT: float(weight)},
                    upsert=True,
                )
        except PyMongoError as e:
            raise RepositoryError(f"Error saving feedback weights: {str(e)}", operation="save_weights")

    async def get_weights(self) -> Dict[str, float]:
        try:
            weights: Dict[str, float] = {}
            async for document in self.weight_collection.find({}):
                weights[document[FeedbackWeightFields.KEY]] = float(document[FeedbackWeightFields.WEIGHT])
            return weights
        except PyMongoError as e:
            raise RepositoryError(f"Error loading feedback weights: {str(e)}", operation="get_weights")

    async def clear(self) -> None:
        try:
            await self.sample_collection.delete_many({})
            await self.performance_collection.delete_many({})
            await self.weight_collection.delete_many({})
        except PyMongoError as e:
            raise RepositoryError(f"Error clearing training data: {str(e)}", operation="clear")

    def _sample_to_dict(self, sample: TrainingSample) -> Dict[str, Any]:
        """
        Convert TrainingSample domain model to MongoDB document

        Args:
            sample: TrainingSample domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            TrainingSampleFields.ID: sample.id,
            TrainingSampleFields.IMAGE: sample.image,
            TrainingSampleFields.FEEDBACK: {
                "is_correct": sample.feedback.is_correct,
                "confidence": sample.feedback.confidence,
                "correct_class": sample.feedback.correct_class,
                "user_annotations": list(sample.feedback.user_annotations),
            },
            TrainingSampleFields.PREDICTIONS: [
                {"class_name": p.class_name, "confidence": p.confidence, "model": p.model}
                for p in sample.predictions
            ],
            TrainingSampleFields.TIMESTAMP: sample.timestamp,
        }

    def _document_to_sample(self, document: Dict[str, Any]) -> TrainingSample:
        """
        Convert MongoDB document to TrainingSample domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            TrainingSample domain model
        """
        feedback = document.get(TrainingSampleFields.FEEDBACK) or {}
        return TrainingSample(
            id=document[TrainingSampleFields.ID],
            image=document.get(TrainingSampleFields.IMAGE) or {},
            feedback=UserFeedback(
                is_correct=bool(feedback.get("is_correct", False)),
                confidence=float(feedback.get("confidence", 0.0)),
                correct_class=feedback.get("correct_class"),
                user_annotations=list(feedback.get("user_annotations") or []),
            ),
            predictions=[
                ModelPrediction(
                    class_name=p.get("class_name", ""),
                    confidence=float(p.get("confidence", 0.0)),
                    model=p.get("model", "unknown"),
                )
                for p in document.get(TrainingSampleFields.PREDICTIONS) or []
            ],
            timestamp=int(document.get(TrainingSampleFields.TIMESTAMP, 0)),
        )

    def _performance_to_dict(self, performance: ModelPerformance) -> Dict[str, Any]:
        return {
            ModelPerformanceFields.MODEL_NAME: performance.model_name,
            ModelPerformanceFields.ACCURACY: performance.accuracy,
            ModelPerformanceFields.TOTAL_PREDICTIONS: performance.total_predictions,
            ModelPerformanceFields.CORRECT_PREDICTIONS: performance.correct_predictions,
            ModelPerformanceFields.AVG_CONFIDENCE: performance.avg_confidence,
            ModelPerformanceFields.LAST_UPDATED: performance.last_updated,
        }

    def _document_to_performance(self, document: Dict[str, Any]) -> ModelPerformance:
        return ModelPerformance(
            model_name=document[ModelPerformanceFields.MODEL_NAME],
            accuracy=float(document.get(ModelPerformanceFields.ACCURACY, 0.0)),
            total_predictions=int(document.get(ModelPerformanceFields.TOTAL_PREDICTIONS, 0)),
            correct_predictions=int(document.get(ModelPerformanceFields.CORRECT_PREDICTIONS, 0)),
            avg_confidence=float(document.get(ModelPerformanceFields.AVG_CONFIDENCE, 0.0)),
            last_updated=int(document.get(ModelPerformanceFields.LAST_UPDATED, 0)),
        )
