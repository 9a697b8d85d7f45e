"""
Mock Classifier Provider
------------------------

Provider for the classification models (MobileNet, EfficientNet). The model
returns a probability vector over its class list, like a softmax head.
"""

from typing import List

import numpy as np

from ..catalog import MODELS
from .seeding import seeded_rng


class MockClassifier:
    """Softmax over random logits seeded by the image; one peaked class per image."""

    def __init__(self, model_key: str, classes: List[str]) -> None:
        self.model_key = model_key
        self.classes = classes

    def __call__(self, image: np.ndarray) -> np.ndarray:
        rng = seeded_rng(image, self.model_key)
        logits = rng.normal(0.0, 1.0, len(self.classes))
        logits[rng.integers(len(self.classes))] += 4.0
        exp = np.exp(logits - logits.max())
        return exp / exp.sum()


class MockClassifierProvider:
    """Builds MockClassifier instances for catalog classification models."""

    def load(self, model_key: str) -> MockClassifier:
        spec = MODELS[model_key]
        return MockClassifier(model_key, list(spec.classes))
