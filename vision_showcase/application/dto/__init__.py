from .base import CamelModel
from .analysis_dto import (
    AnalysisResultResponse,
    DatasetCatalogEntry,
    BatchDetection,
    BatchItemResult,
    BatchStats,
    BatchProcessResponse,
)
from .dataset_dto import (
    DatasetRegisterRequest,
    DatasetConfigResponse,
    DatasetImageResponse,
    DatasetBatchResponse,
)
from .training_dto import (
    PredictionSchema,
    FeedbackSchema,
    FeedbackRequest,
    FeedbackResponse,
    FineTuneRequest,
    FineTuneResult,
    FineTuneResponse,
    AdjustPredictionsRequest,
    AdjustedPrediction,
    AdjustPredictionsResponse,
    ModelPerformanceSchema,
    TrainingStatsResponse,
    TrainingExportResponse,
    TrainingConfigSchema,
    TrainingJobCreateRequest,
    TrainingProgress,
    TrainingJobResponse,
    SystemStatsResponse,
)
from .chat_dto import (
    ChatMessageRequest,
    ChatMessageSchema,
    ChatExchangeResponse,
    ChatHistoryResponse,
    SuggestionsResponse,
    UserPreferencesSchema,
    UserPreferencesUpdate,
    ChatContextSchema,
    ChatContextUpdateRequest,
)
from .model_dto import ModelInfoResponse, BenchmarkSchema, BenchmarksResponse

__all__ = [
    "CamelModel",
    "AnalysisResultResponse",
    "DatasetCatalogEntry",
    "BatchDetection",
    "BatchItemResult",
    "BatchStats",
    "BatchProcessResponse",
    "DatasetRegisterRequest",
    "DatasetConfigResponse",
    "DatasetImageResponse",
    "DatasetBatchResponse",
    "PredictionSchema",
    "FeedbackSchema",
    "FeedbackRequest",
    "FeedbackResponse",
    "FineTuneRequest",
    "FineTuneResult",
    "FineTuneResponse",
    "AdjustPredictionsRequest",
    "AdjustedPrediction",
    "AdjustPredictionsResponse",
    "ModelPerformanceSchema",
    "TrainingStatsResponse",
    "TrainingExportResponse",
    "TrainingConfigSchema",
    "TrainingJobCreateRequest",
    "TrainingProgress",
    "TrainingJobResponse",
    "SystemStatsResponse",
    "ChatMessageRequest",
    "ChatMessageSchema",
    "ChatExchangeResponse",
    "ChatHistoryResponse",
    "SuggestionsResponse",
    "UserPreferencesSchema",
    "UserPreferencesUpdate",
    "ChatContextSchema",
    "ChatContextUpdateRequest",
    "ModelInfoResponse",
    "BenchmarkSchema",
    "BenchmarksResponse",
]
