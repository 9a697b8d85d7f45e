"""
Mock analysis payloads
----------------------

Fixed bodies returned by the upload analysis endpoints and the random
result generator used by batch processing. Payload keys are already in the
shape clients receive.
"""

import copy
import random
from typing import Any, Dict, List, Optional

from ..domain.constants import (
    ANALYSIS_AUTONOMOUS,
    ANALYSIS_CLASSIFICATION,
    ANALYSIS_DETECTION,
    ANALYSIS_FACIAL,
    ANALYSIS_OCR,
    ANALYSIS_SEGMENTATION,
)


def _bbox(x: int, y: int, width: int, height: int) -> Dict[str, int]:
    return {"x": x, "y": y, "width": width, "height": height}


_STATIC_PAYLOADS: Dict[str, Dict[str, Any]] = {
    ANALYSIS_CLASSIFICATION: {
        "predictions": [
            {"class": "Golden Retriever", "confidence": 0.89},
            {"class": "Labrador", "confidence": 0.76},
            {"class": "Dog", "confidence": 0.95},
        ],
    },
    ANALYSIS_DETECTION: {
        "detections": [
            {"class": "person", "confidence": 0.92, "bbox": _bbox(100, 50, 200, 300)},
            {"class": "car", "confidence": 0.85, "bbox": _bbox(350, 200, 150, 100)},
        ],
    },
    ANALYSIS_SEGMENTATION: {
        "segments": [
            {"class": "road", "pixels": 15420, "color": "#808080"},
            {"class": "building", "pixels": 8930, "color": "#8B4513"},
            {"class": "sky", "pixels": 12100, "color": "#87CEEB"},
        ],
    },
    ANALYSIS_FACIAL: {
        "faces": [
            {
                "emotion": "happy",
                "confidence": 0.88,
                "age": 25,
                "gender": "female",
                "bbox": _bbox(120, 80, 100, 120),
            },
        ],
    },
    ANALYSIS_OCR: {
        "text": [
            {"text": "STOP", "confidence": 0.95, "bbox": _bbox(50, 30, 80, 40)},
            {"text": "Main Street", "confidence": 0.87, "bbox": _bbox(20, 100, 120, 25)},
        ],
    },
    ANALYSIS_AUTONOMOUS: {
        "objects": [
            {"class": "car", "confidence": 0.94, "distance": 15.2, "bbox": _bbox(200, 150, 120, 80)},
            {"class": "pedestrian", "confidence": 0.87, "distance": 8.5, "bbox": _bbox(100, 180, 40, 100)},
            {"class": "traffic_sign", "confidence": 0.91, "distance": 12.0, "bbox": _bbox(350, 100, 30, 40)},
        ],
        "laneLines": [
            {"start": {"x": 0, "y": 300}, "end": {"x": 200, "y": 250}},
            {"start": {"x": 400, "y": 250}, "end": {"x": 640, "y": 300}},
        ],
        "depthMap": True,
        "drivingConditions": {
            "weather": "clear",
            "timeOfDay": "day",
            "roadType": "urban",
            "visibility": "good",
        },
        "safetyScore": 85,
        "recommendations": [
            "Maintain safe distance from vehicle ahead",
            "Monitor pedestrian on the right",
            "Observe speed limit sign",
        ],
    },
}

STATIC_ANALYSIS_TYPES = tuple(_STATIC_PAYLOADS.keys())

BATCH_CLASSES = ["person", "car", "bicycle", "dog", "cat"]
BATCH_SUCCESS_RATE = 0.9


def static_payload(analysis_type: str) -> Dict[str, Any]:
    """A fresh copy of the fixed payload for an analysis type."""
    if analysis_type not in _STATIC_PAYLOADS:
        raise ValueError(f"No static payload for analysis type: {analysis_type}")
    return copy.deepcopy(_STATIC_PAYLOADS[analysis_type])


def simulate_batch_item(
    index: int,
    filename: str,
    size: int,
    model: str,
    rng: Optional[random.Random] = None,
) -> Dict[str, Any]:
    """
    Simulated processing of one batch file.

    Succeeds 90% of the time with 1-8 detections; processing time is 500-2499 ms.
    """
    rng = rng or random.Random()
    success = rng.random() < BATCH_SUCCESS_RATE
    detection_count = rng.randint(1, 8) if success else 0

    detections: List[Dict[str, Any]] = [
        {
            "class": rng.choice(BATCH_CLASSES),
            "confidence": rng.random() * 0.3 + 0.7,
            "bbox": [
                rng.randrange(400),
                rng.randrange(300),
                rng.randrange(200) + 100,
                rng.randrange(200) + 100,
            ],
        }
        for _ in range(detection_count)
    ]

    return {
        "id": index,
        "filename": filename,
        "size": size,
        "status": "success" if success else "failed",
        "detections": detections,
        "processing_time": rng.randrange(2000) + 500,
        "model": model,
    }
