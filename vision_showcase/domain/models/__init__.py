from .analysis_result import AnalysisResult
from .dataset import (
    SplitRatio,
    AugmentationConfig,
    PreprocessingConfig,
    DatasetConfig,
    BoundingBoxAnnotation,
    DatasetImage,
    TrainingBatch,
)
from .training import (
    ModelPrediction,
    UserFeedback,
    TrainingSample,
    ModelPerformance,
    TrainingJobStatus,
    TrainingConfig,
    TrainingJob,
)
from .chat_message import ChatMessage, ChatContext, UserPreferences

__all__ = [
    "AnalysisResult",
    "SplitRatio",
    "AugmentationConfig",
    "PreprocessingConfig",
    "DatasetConfig",
    "BoundingBoxAnnotation",
    "DatasetImage",
    "TrainingBatch",
    "ModelPrediction",
    "UserFeedback",
    "TrainingSample",
    "ModelPerformance",
    "TrainingJobStatus",
    "TrainingConfig",
    "TrainingJob",
    "ChatMessage",
    "ChatContext",
    "UserPreferences",
]
