from typing import List
from pydantic import Field

from .base import CamelModel


class ModelInfoResponse(CamelModel):
    """DTO for a catalog model"""
    key: str
    name: str
    source: str
    type: str
    input_size: List[int]
    classes: int
    loaded: bool


class BenchmarkSchema(CamelModel):
    name: str
    category: str
    accuracy: float
    speed: float
    size: float
    memory: float
    fps: float
    map: float = Field(alias="mAP")
    description: str
    strengths: List[str]
    weaknesses: List[str]
    use_cases: List[str]
    score: float


class BenchmarksResponse(CamelModel):
    metric: str
    best: str
    models: List[BenchmarkSchema]
