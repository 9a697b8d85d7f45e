"""
Model providers (mock classifier, detectors, segmenter)
-------------------------------------------------------

Concrete providers registered with the ModelRegistry by ModelManager.
"""

from .mock_classifier import MockClassifier, MockClassifierProvider
from .mock_detector import MockObjectDetector, MockFaceDetector, MockDetectorProvider
from .mock_segmenter import MockPersonSegmenter, MockSegmenterProvider

__all__ = [
    "MockClassifier",
    "MockClassifierProvider",
    "MockObjectDetector",
    "MockFaceDetector",
    "MockDetectorProvider",
    "MockPersonSegmenter",
    "MockSegmenterProvider",
]
