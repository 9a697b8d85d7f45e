# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any

# Local application imports
from ..constants.media_constants import ANALYSIS_TYPES


@dataclass
class AnalysisResult:
    """
    Pure domain model for one analysis run over an uploaded image.

    The type-specific body (predictions, detections, segments, faces, text,
    driving analysis) lives in `payload`, keyed the same way it is returned
    to clients.
    """
    id: int
    type: str
    image_path: str
    timestamp: datetime
    payload: Dict[str, Any] = field(default_factory=dict)
    dataset: Optional[str] = None
    model: Optional[str] = None
    processing_time_ms: Optional[float] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if self.type not in ANALYSIS_TYPES:
            raise ValueError(f"Unknown analysis type: {self.type}")
        if not self.image_path or len(self.image_path.strip()) < 1:
            raise ValueError("Image path is required")
