"""
Mock Detector Providers
-----------------------

Object detector (COCO-SSD) and face detector (BlazeFace) stand-ins. Boxes
are always inside the image.
"""

from typing import Any, Dict, List

import numpy as np

from ..catalog import MODELS
from .seeding import seeded_rng


def _random_box(rng: np.random.Generator, width: int, height: int) -> List[float]:
    box_w = float(rng.uniform(0.1, 0.5) * width)
    box_h = float(rng.uniform(0.1, 0.5) * height)
    x = float(rng.uniform(0, width - box_w))
    y = float(rng.uniform(0, height - box_h))
    return [round(x, 1), round(y, 1), round(box_w, 1), round(box_h, 1)]


class MockObjectDetector:
    """Returns 1-4 detections shaped like coco-ssd output: class, score, bbox [x, y, w, h]."""

    def __init__(self, classes: List[str]) -> None:
        self.classes = classes

    def __call__(self, image: np.ndarray) -> List[Dict[str, Any]]:
        rng = seeded_rng(image, "detector")
        height, width = image.shape[:2]
        detections = []
        for _ in range(int(rng.integers(1, 5))):
            detections.append({
                "class": self.classes[int(rng.integers(len(self.classes)))],
                "score": round(float(rng.uniform(0.5, 0.99)), 4),
                "bbox": _random_box(rng, width, height),
            })
        return sorted(detections, key=lambda d: d["score"], reverse=True)


class MockFaceDetector:
    """Returns faces shaped like blazeface output: topLeft, bottomRight, probability, six landmarks."""

    def __call__(self, image: np.ndarray) -> List[Dict[str, Any]]:
        rng = seeded_rng(image, "faces")
        height, width = image.shape[:2]
        faces = []
        for _ in range(int(rng.integers(0, 3))):
            x, y, w, h = _random_box(rng, width, height)
            landmarks = [
                [round(float(rng.uniform(x, x + w)), 1), round(float(rng.uniform(y, y + h)), 1)]
                for _ in range(6)
            ]
            faces.append({
                "topLeft": [x, y],
                "bottomRight": [x + w, y + h],
                "probability": [round(float(rng.uniform(0.8, 0.99)), 4)],
                "landmarks": landmarks,
            })
        return faces


class MockDetectorProvider:
    """Builds the detector for a catalog detection model."""

    def load(self, model_key: str):
        spec = MODELS[model_key]
        if spec.classes == ["face"]:
            return MockFaceDetector()
        return MockObjectDetector(list(spec.classes))
