from typing import Optional, List, Dict, Any
from pydantic import ConfigDict, Field

from .base import CamelModel


class AnalysisResultResponse(CamelModel):
    """
    DTO for one analysis result.

    The type-specific body (predictions, detections, segments, faces, text,
    objects/laneLines/...) is carried as extra top-level fields.
    """
    model_config = ConfigDict(extra="allow")

    id: int
    type: str
    dataset: Optional[str] = None
    image_path: str
    timestamp: str
    model: Optional[str] = None
    processing_time: Optional[float] = None


class DatasetCatalogEntry(CamelModel):
    """DTO for an entry of the static dataset catalog"""
    name: str
    categories: int
    images: str


class BatchDetection(CamelModel):
    class_name: str = Field(alias="class")
    confidence: float
    bbox: List[int]


class BatchItemResult(CamelModel):
    """DTO for one file of a batch run"""
    id: int
    filename: str
    size: int
    status: str
    detections: List[BatchDetection]
    processing_time: int
    timestamp: str
    model: str


class BatchStats(CamelModel):
    total_files: int
    processed: int
    successful: int
    failed: int
    avg_processing_time: float
    total_detections: int


class BatchProcessResponse(CamelModel):
    """DTO for a batch processing run"""
    model: str
    results: List[BatchItemResult]
    stats: BatchStats
