"""
Feedback-driven training system.

Collects user feedback on predictions, keeps per-model accuracy bookkeeping
and derives per-class confidence weights from the feedback. Nothing here is
real learning: accuracy is a running ratio and "fine-tuning" multiplies a
weight per class.
"""
import asyncio
import logging
import random
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from ...core.config import get_settings
from ...core.exceptions import RepositoryError
from ...domain.models.training import ModelPerformance, ModelPrediction, TrainingSample, UserFeedback
from ...domain.repositories.training_repository import TrainingRepository
from ...utils.datetime_utils import now_ms
from ...utils.ids import prefixed_id

logger = logging.getLogger(__name__)

DEFAULT_MODELS = ["mobilenet", "cocoSsd", "efficientNet", "blazeFace"]
DEFAULT_MODEL_ACCURACY = 0.9
UNKNOWN_MODEL = "unknown"


def weight_key(model_name: str, class_name: str) -> str:
    return f"{model_name}_{class_name}"


class TrainingSystemService:
    """
    Stateful service holding training samples, model performance and learned weights.

    State is loaded lazily from the repository on first use and written back
    after each change. Load and save failures are logged and do not abort the
    operation.
    """

    def __init__(
        self,
        training_repository: TrainingRepository,
        min_fine_tune_samples: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.training_repository = training_repository
        self.min_fine_tune_samples = (
            min_fine_tune_samples
            if min_fine_tune_samples is not None
            else get_settings().fine_tune_min_samples
        )
        self._rng = rng or random.Random()
        self._samples: Dict[str, TrainingSample] = {}
        self._performance: Dict[str, ModelPerformance] = {}
        self._weights: Dict[str, float] = {}
        self._loaded = False
        self._lock = asyncio.Lock()

    # ------------------------------------------------------------------
    # State management
    # ------------------------------------------------------------------

    async def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        try:
            samples = await self.training_repository.list_samples()
            performance = await self.training_repository.list_performance()
            weights = await self.training_repository.get_weights()
            self._samples = {sample.id: sample for sample in samples}
            self._performance = {perf.model_name: perf for perf in performance}
            self._weights = dict(weights)
        except RepositoryError as e:
            logger.warning(f"Could not load training data: {e}")
        self._loaded = True
        await self._initialize_model_performance()

    async def _initialize_model_performance(self) -> None:
        created = []
        for model_name in DEFAULT_MODELS:
            if model_name not in self._performance:
                self._performance[model_name] = ModelPerformance(
                    model_name=model_name,
                    accuracy=0.85 + self._rng.random() * 0.1,
                    total_predictions=0,
                    correct_predictions=0,
                    avg_confidence=0.8,
                    last_updated=now_ms(),
                )
                created.append(self._performance[model_name])
        for performance in created:
            await self._save_performance(performance)

    async def _save_performance(self, performance: ModelPerformance) -> None:
        try:
            await self.training_repository.save_performance(performance)
        except RepositoryError as e:
            logger.warning(f"Could not save performance for {performance.model_name}: {e}")

    # ------------------------------------------------------------------
    # Feedback collection
    # ------------------------------------------------------------------

    async def collect_training_data(
        self,
        image: Dict[str, Any],
        predictions: List[ModelPrediction],
        feedback: UserFeedback,
    ) -> TrainingSample:
        """
        Store a feedback sample and update the performance of every model that predicted.

        Args:
            image: Metadata about the image (path, width, height)
            predictions: What the models predicted
            feedback: What the user said about the predictions

        Returns:
            The stored TrainingSample
        """
        async with self._lock:
            await self._ensure_loaded()
            sample = TrainingSample(
                id=prefixed_id("training", self._rng),
                feedback=feedback,
                predictions=list(predictions),
                timestamp=now_ms(),
                image=dict(image),
            )
            self._samples[sample.id] = sample
            touched = self._update_model_performance(sample.predictions, feedback)

            try:
                await self.training_repository.save_sample(sample)
            except RepositoryError as e:
                logger.warning(f"Could not save training sample {sample.id}: {e}")
            for performance in touched:
                await self._save_performance(performance)

        logger.info(
            f"Collected training sample {sample.id} "
            f"({len(sample.predictions)} predictions, correct={feedback.is_correct})"
        )
        return sample

    def _update_model_performance(
        self,
        predictions: List[ModelPrediction],
        feedback: UserFeedback,
    ) -> List[ModelPerformance]:
        touched: Dict[str, ModelPerformance] = {}
        for prediction in predictions:
            model_name = prediction.model or UNKNOWN_MODEL
            performance = self._performance.get(model_name)
            if performance is None:
                performance = ModelPerformance(model_name=model_name, last_updated=now_ms())

            performance.total_predictions += 1
            if feedback.is_correct:
                performance.correct_predictions += 1

            performance.accuracy = performance.correct_predictions / performance.total_predictions
            performance.avg_confidence = (performance.avg_confidence + prediction.confidence) / 2
            performance.last_updated = now_ms()

            self._performance[model_name] = performance
            touched[model_name] = performance
        return list(touched.values())

    # ------------------------------------------------------------------
    # Prediction adjustment
    # ------------------------------------------------------------------

    def _training_data_count(self, class_name: str) -> int:
        return sum(1 for sample in self._samples.values() if sample.mentions_class(class_name))

    def _variability_factor(self, class_name: str) -> float:
        count = self._training_data_count(class_name)
        if count > 50:
            return 1.0
        if count > 20:
            return 0.95
        if count > 10:
            return 0.9
        return 0.8 + self._rng.random() * 0.2

    async def get_training_data_count(self, class_name: str) -> int:
        await self._ensure_loaded()
        return self._training_data_count(class_name)

    async def generate_dynamic_predictions(
        self,
        base_predictions: List[Dict[str, Any]],
        model_name: str,
    ) -> List[Dict[str, Any]]:
        """
        Scale base predictions by the model's tracked accuracy and per-class variability.

        Args:
            base_predictions: Dicts with at least "class" and "confidence"
            model_name: Model whose accuracy drives the multiplier

        Returns:
            New dicts with adjusted confidence plus rank, model_accuracy and training_data_points
        """
        await self._ensure_loaded()
        performance = self._performance.get(model_name)
        multiplier = performance.accuracy if performance else 1.0
        model_accuracy = performance.accuracy if performance and performance.accuracy else DEFAULT_MODEL_ACCURACY

        adjusted = []
        for index, prediction in enumerate(base_predictions):
            class_name = prediction["class"]
            variability = self._variability_factor(class_name)
            confidence = min(
                1.0,
                prediction["confidence"] * multiplier * (0.9 + self._rng.random() * 0.2) * variability,
            )
            adjusted.append({
                **prediction,
                "confidence": confidence,
                "rank": index + 1,
                "model_accuracy": model_accuracy,
                "training_data_points": self._training_data_count(class_name),
            })
        return adjusted

    async def apply_learned_weights(
        self,
        predictions: List[Dict[str, Any]],
        model_name: str,
    ) -> List[Dict[str, Any]]:
        """Multiply each confidence by the learned class weight (1.0 when none) and flag learned ones."""
        await self._ensure_loaded()
        weighted = []
        for prediction in predictions:
            weight = self._weights.get(weight_key(model_name, prediction["class"]), 1.0)
            weighted.append({
                **prediction,
                "confidence": min(1.0, prediction["confidence"] * weight),
                "is_learned": weight != 1.0,
            })
        return weighted

    # ------------------------------------------------------------------
    # Fine-tuning
    # ------------------------------------------------------------------

    async def fine_tune_model(self, model_name: str) -> Dict[str, Any]:
        """
        Derive class weights for a model from the feedback samples it took part in.

        Returns:
            {"model", "samples", "fine_tuned", "weights"}; fine_tuned is False
            when there were fewer samples than the configured minimum
        """
        async with self._lock:
            await self._ensure_loaded()
            relevant = [sample for sample in self._samples.values() if sample.has_model(model_name)]

            if len(relevant) < self.min_fine_tune_samples:
                logger.info(
                    f"Not enough training data for fine-tuning {model_name} "
                    f"({len(relevant)}/{self.min_fine_tune_samples})"
                )
                return {"model": model_name, "samples": len(relevant), "fine_tuned": False, "weights": {}}

            class_weights: Dict[str, float] = {}
            for sample in relevant:
                correct_class = sample.feedback.correct_class
                if correct_class:
                    adjustment = 1.1 if sample.feedback.is_correct else 0.9
                    class_weights[correct_class] = class_weights.get(correct_class, 1.0) * adjustment

            stored = {weight_key(model_name, class_name): weight for class_name, weight in class_weights.items()}
            self._weights.update(stored)
            try:
                await self.training_repository.save_weights(stored)
            except RepositoryError as e:
                logger.warning(f"Could not save weights for {model_name}: {e}")

        logger.info(f"Fine-tuned {model_name} with {len(relevant)} training samples")
        return {"model": model_name, "samples": len(relevant), "fine_tuned": True, "weights": class_weights}

    async def tracked_models(self) -> List[str]:
        await self._ensure_loaded()
        return list(self._performance.keys())

    # ------------------------------------------------------------------
    # Stats and housekeeping
    # ------------------------------------------------------------------

    async def get_training_stats(self) -> Dict[str, Any]:
        await self._ensure_loaded()
        model_stats = list(self._performance.values())
        average_accuracy = (
            sum(perf.accuracy for perf in model_stats) / len(model_stats) if model_stats else 0.0
        )
        return {
            "total_training_samples": len(self._samples),
            "models_tracked": len(model_stats),
            "average_accuracy": average_accuracy,
            "last_training_update": max([perf.last_updated for perf in model_stats] + [0]),
            "model_performance": [asdict(perf) for perf in model_stats],
        }

    async def total_samples(self) -> int:
        await self._ensure_loaded()
        return len(self._samples)

    async def export_snapshot(self) -> Dict[str, Any]:
        """Everything the system knows, as plain data."""
        await self._ensure_loaded()
        return {
            "training_data": [asdict(sample) for sample in self._samples.values()],
            "model_performance": [asdict(perf) for perf in self._performance.values()],
            "feedback_weights": dict(self._weights),
            "exported_at": now_ms(),
        }

    async def clear_training_data(self) -> None:
        """Remove every sample, performance record and weight, then restore the default models."""
        async with self._lock:
            self._samples.clear()
            self._performance.clear()
            self._weights.clear()
            try:
                await self.training_repository.clear()
            except RepositoryError as e:
                logger.warning(f"Could not clear stored training data: {e}")
            self._loaded = True
            await self._initialize_model_performance()
        logger.info("Training data cleared")
