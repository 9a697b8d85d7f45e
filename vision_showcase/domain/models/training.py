# Standard library imports
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any


@dataclass
class ModelPrediction:
    """One prediction a model made for an image"""
    class_name: str
    confidence: float
    model: str = "unknown"


@dataclass
class UserFeedback:
    """What the user said about a set of predictions"""
    is_correct: bool
    confidence: float = 0.0
    correct_class: Optional[str] = None
    user_annotations: List[str] = field(default_factory=list)


@dataclass
class TrainingSample:
    """
    Pure domain model for a feedback-driven training sample.

    `image` holds metadata about the source image (path, width, height), not
    the pixels themselves.
    """
    id: str
    feedback: UserFeedback
    predictions: List[ModelPrediction]
    timestamp: int
    image: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.id:
            raise ValueError("Training sample ID is required")

    def mentions_class(self, class_name: str) -> bool:
        if self.feedback.correct_class == class_name:
            return True
        return any(prediction.class_name == class_name for prediction in self.predictions)

    def has_model(self, model_name: str) -> bool:
        return any(prediction.model == model_name for prediction in self.predictions)


@dataclass
class ModelPerformance:
    """Running accuracy bookkeeping for one model"""
    model_name: str
    accuracy: float = 0.0
    total_predictions: int = 0
    correct_predictions: int = 0
    avg_confidence: float = 0.0
    last_updated: int = 0


class TrainingJobStatus(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (
            TrainingJobStatus.COMPLETED,
            TrainingJobStatus.FAILED,
            TrainingJobStatus.CANCELLED,
        )


@dataclass
class TrainingConfig:
    """Hyperparameters for a simulated training run"""
    batch_size: int = 32
    epochs: int = 10
    learning_rate: float = 0.001
    checkpoint_frequency: int = 5
    max_images: Optional[int] = None

    def __post_init__(self) -> None:
        if self.batch_size < 1:
            raise ValueError("Batch size must be at least 1")
        if self.epochs < 1:
            raise ValueError("Epochs must be at least 1")
        if self.learning_rate <= 0:
            raise ValueError("Learning rate must be positive")
        if self.checkpoint_frequency < 1:
            raise ValueError("Checkpoint frequency must be at least 1")
        if self.max_images is not None and self.max_images < 1:
            raise ValueError("max_images must be at least 1")


@dataclass
class TrainingJob:
    """A background training run and its latest progress snapshot"""
    id: str
    dataset_name: str
    model_name: str
    config: TrainingConfig
    created_at: int
    status: TrainingJobStatus = TrainingJobStatus.PENDING
    progress: Optional[Dict[str, Any]] = None
    checkpoints: List[int] = field(default_factory=list)
    started_at: Optional[int] = None
    finished_at: Optional[int] = None
    error: Optional[str] = None
