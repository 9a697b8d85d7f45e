from typing import Optional, List, Dict, Any
from pydantic import Field

from .base import CamelModel


class DatasetRegisterRequest(CamelModel):
    """DTO for dataset registration request"""
    name: str = Field(min_length=1)
    total_images: int = Field(ge=0)
    categories: List[str] = Field(min_length=1)


class SplitRatioSchema(CamelModel):
    train: float
    validation: float
    test: float


class AugmentationConfigSchema(CamelModel):
    rotation: bool
    flip: bool
    brightness: bool
    contrast: bool
    noise: bool
    crop: bool


class ResizeSchema(CamelModel):
    width: int
    height: int


class PreprocessingSchema(CamelModel):
    resize: ResizeSchema
    normalize: bool
    grayscale: bool


class DatasetConfigResponse(CamelModel):
    """DTO for a registered dataset"""
    name: str
    version: str
    total_images: int
    categories: List[str]
    split_ratio: SplitRatioSchema
    augmentation_config: AugmentationConfigSchema
    preprocessing: PreprocessingSchema


class BoundingBoxSchema(CamelModel):
    x: float
    y: float
    width: float
    height: float
    label: str
    confidence: float


class DatasetImageResponse(CamelModel):
    id: str
    url: str
    label: str
    category: str
    metadata: Dict[str, Any]
    annotations: Optional[Dict[str, List[BoundingBoxSchema]]] = None
    augmentations: Optional[List[str]] = None
    preprocessed: bool
    validated: bool


class DatasetBatchResponse(CamelModel):
    """DTO for a loaded (and optionally preprocessed) dataset batch"""
    dataset: str
    start_index: int
    batch_size: int
    count: int
    images: List[DatasetImageResponse]
