from typing import Optional, List, Dict, Any
from pydantic import Field

from .base import CamelModel


class PredictionSchema(CamelModel):
    """A model prediction as sent by clients"""
    class_name: str = Field(alias="class")
    confidence: float = Field(ge=0.0)
    model: Optional[str] = None


class FeedbackSchema(CamelModel):
    is_correct: bool
    confidence: float = 0.0
    correct_class: Optional[str] = None
    user_annotations: List[str] = Field(default_factory=list)


class FeedbackRequest(CamelModel):
    """DTO for submitting feedback on predictions"""
    predictions: List[PredictionSchema] = Field(min_length=1)
    feedback: FeedbackSchema
    model: Optional[str] = None  # applied to predictions that name no model
    image: Dict[str, Any] = Field(default_factory=dict)


class FineTuneResult(CamelModel):
    model: str
    samples: int
    fine_tuned: bool
    weights: Dict[str, float] = Field(default_factory=dict)


class FeedbackResponse(CamelModel):
    sample_id: str
    total_training_samples: int
    fine_tune: Optional[FineTuneResult] = None


class FineTuneRequest(CamelModel):
    model: Optional[str] = None  # fine-tune every tracked model when omitted


class FineTuneResponse(CamelModel):
    results: List[FineTuneResult]


class AdjustPredictionsRequest(CamelModel):
    model: str
    predictions: List[PredictionSchema]
    threshold: float = Field(default=0.0, ge=0.0, le=1.0)


class AdjustedPrediction(CamelModel):
    class_name: str = Field(alias="class")
    confidence: float
    rank: int
    model_accuracy: float
    training_data_points: int
    is_learned: bool
    model: Optional[str] = None


class AdjustPredictionsResponse(CamelModel):
    model: str
    predictions: List[AdjustedPrediction]


class ModelPerformanceSchema(CamelModel):
    model_name: str
    accuracy: float
    total_predictions: int
    correct_predictions: int
    avg_confidence: float
    last_updated: int


class TrainingStatsResponse(CamelModel):
    """DTO for training statistics"""
    total_training_samples: int
    models_tracked: int
    average_accuracy: float
    last_training_update: int
    model_performance: List[ModelPerformanceSchema]


class TrainingExportResponse(CamelModel):
    training_data: List[Dict[str, Any]]
    model_performance: List[ModelPerformanceSchema]
    feedback_weights: Dict[str, float]
    exported_at: int


class TrainingConfigSchema(CamelModel):
    batch_size: int
    epochs: int
    learning_rate: float
    checkpoint_frequency: int
    max_images: Optional[int] = None


class TrainingJobCreateRequest(CamelModel):
    """DTO for starting a simulated training run; omitted hyperparameters use configured defaults"""
    dataset: str = Field(min_length=1)
    model: str = "mobilenet"
    batch_size: Optional[int] = Field(default=None, ge=1)
    epochs: Optional[int] = Field(default=None, ge=1)
    learning_rate: Optional[float] = Field(default=None, gt=0)
    checkpoint_frequency: Optional[int] = Field(default=None, ge=1)
    max_images: Optional[int] = Field(default=None, ge=1)


class TrainingProgress(CamelModel):
    """Progress snapshot of a training run"""
    start_time: int
    total_images: int
    processed_images: int
    samples_seen: int
    current_epoch: int
    total_epochs: int
    current_batch: int
    total_batches: int
    accuracy: float
    loss: float
    learning_rate: float
    validation_accuracy: Optional[float] = None
    progress: float
    batch_progress: float
    epoch_progress: float
    estimated_time_remaining: float
    memory_usage: Dict[str, int]
    throughput: float


class TrainingJobResponse(CamelModel):
    """DTO for a training job"""
    id: str
    dataset: str
    model: str
    status: str
    config: TrainingConfigSchema
    progress: Optional[TrainingProgress] = None
    checkpoints: List[int] = Field(default_factory=list)
    created_at: int
    started_at: Optional[int] = None
    finished_at: Optional[int] = None
    error: Optional[str] = None


class SystemStatsResponse(CamelModel):
    cpu_usage: float
    memory_usage: float
    gpu_usage: float
    disk_usage: float
    active_jobs: int
