"""Constants for domain model field names and shared media rules"""

from .result_fields import ResultFields
from .training_fields import TrainingSampleFields, ModelPerformanceFields, FeedbackWeightFields
from .dataset_fields import DatasetFields
from .chat_fields import ChatMessageFields
from .media_constants import (
    ALLOWED_IMAGE_EXTENSIONS,
    IMAGE_FORM_FIELD,
    BATCH_IMAGES_FORM_FIELD,
    ANALYSIS_CLASSIFICATION,
    ANALYSIS_DETECTION,
    ANALYSIS_SEGMENTATION,
    ANALYSIS_FACIAL,
    ANALYSIS_OCR,
    ANALYSIS_AUTONOMOUS,
    ANALYSIS_ENHANCED_CLASSIFICATION,
    ANALYSIS_TYPES,
)

__all__ = [
    "ResultFields",
    "TrainingSampleFields",
    "ModelPerformanceFields",
    "FeedbackWeightFields",
    "DatasetFields",
    "ChatMessageFields",
    "ALLOWED_IMAGE_EXTENSIONS",
    "IMAGE_FORM_FIELD",
    "BATCH_IMAGES_FORM_FIELD",
    "ANALYSIS_CLASSIFICATION",
    "ANALYSIS_DETECTION",
    "ANALYSIS_SEGMENTATION",
    "ANALYSIS_FACIAL",
    "ANALYSIS_OCR",
    "ANALYSIS_AUTONOMOUS",
    "ANALYSIS_ENHANCED_CLASSIFICATION",
    "ANALYSIS_TYPES",
]
