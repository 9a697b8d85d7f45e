"""
Model Manager
-------------

Manages model loading, caching, and lifecycle.
Provides a single interface for running the catalog models regardless of type.
"""

import logging
from typing import Any, Dict, List

import numpy as np

from ...core.exceptions import ModelNotFoundError, ValidationError
from .catalog import MODELS
from .contracts import Model, Provider
from .registry import ModelRegistry, get_provider
from .providers import MockClassifierProvider, MockDetectorProvider, MockSegmenterProvider

logger = logging.getLogger(__name__)

MOBILENET_TOP_K = 3
EFFICIENTNET_TOP_K = 5

# Auto-register default providers on first ModelManager creation
_initialized = False


def _initialize_default_providers() -> None:
    """Register default model providers."""
    global _initialized
    if _initialized:
        return

    ModelRegistry.register("mobilenet", MockClassifierProvider)
    ModelRegistry.register("efficientNet", MockClassifierProvider)
    ModelRegistry.register("cocoSsd", MockDetectorProvider)
    ModelRegistry.register("blazeFace", MockDetectorProvider)
    ModelRegistry.register("bodyPix", MockSegmenterProvider)

    _initialized = True


def _top_k(probabilities: np.ndarray, classes: List[str], k: int) -> List[Dict[str, Any]]:
    order = np.argsort(probabilities)[::-1][:k]
    return [
        {
            "class": classes[index] if index < len(classes) else f"Class {index}",
            "confidence": float(probabilities[index]),
        }
        for index in order
    ]


class ModelManager:
    """
    Manages model loading and caching.

    Models are built once per key and reused; the catalog `loaded` state is
    tracked per manager.
    """

    def __init__(self):
        """Initialize model manager with empty cache."""
        self._cache: Dict[str, Model] = {}
        _initialize_default_providers()

    def load_model(self, model_key: str) -> Model:
        """
        Load a model by catalog key, using cache if available.

        Args:
            model_key: Catalog key (e.g. "mobilenet", "cocoSsd")

        Returns:
            Loaded model instance

        Raises:
            ModelNotFoundError: If the key is not in the catalog or has no provider
        """
        if model_key in self._cache:
            return self._cache[model_key]

        if model_key not in MODELS:
            raise ModelNotFoundError(model_key)

        provider_class = get_provider(model_key)
        if provider_class is None:
            raise ModelNotFoundError(model_key)

        provider: Provider = provider_class()
        model = provider.load(model_key)
        self._cache[model_key] = model
        logger.info(f"Loaded model {model_key} ({MODELS[model_key].name})")
        return model

    def classify_image(self, model_key: str, image: np.ndarray) -> List[Dict[str, Any]]:
        """
        Classify an image.

        Returns:
            List of {"class", "confidence"}, best first (top 3 for MobileNet, top 5 for EfficientNet)
        """
        if model_key not in ("mobilenet", "efficientNet"):
            self._require_known(model_key)
            raise ValidationError(f"Classification not supported for model: {model_key}")

        model = self.load_model(model_key)
        probabilities = model(image)
        k = MOBILENET_TOP_K if model_key == "mobilenet" else EFFICIENTNET_TOP_K
        return _top_k(probabilities, MODELS[model_key].classes, k)

    def detect_objects(self, model_key: str, image: np.ndarray) -> List[Dict[str, Any]]:
        """Detect objects; only COCO-SSD supports this. Returns {"class", "confidence", "bbox"}."""
        if model_key != "cocoSsd":
            self._require_known(model_key)
            raise ValidationError(f"Object detection not supported for model: {model_key}")

        model = self.load_model(model_key)
        return [
            {"class": pred["class"], "confidence": pred["score"], "bbox": pred["bbox"]}
            for pred in model(image)
        ]

    def detect_faces(self, image: np.ndarray) -> List[Dict[str, Any]]:
        model = self.load_model("blazeFace")
        faces = []
        for pred in model(image):
            top_left, bottom_right = pred["topLeft"], pred["bottomRight"]
            faces.append({
                "bbox": [
                    top_left[0],
                    top_left[1],
                    bottom_right[0] - top_left[0],
                    bottom_right[1] - top_left[1],
                ],
                "confidence": pred["probability"][0] if pred.get("probability") else 0.9,
                "landmarks": pred["landmarks"],
            })
        return faces

    def segment_person(self, image: np.ndarray) -> Dict[str, Any]:
        model = self.load_model("bodyPix")
        return model(image)

    def get_loaded_models(self) -> List[str]:
        return list(self._cache.keys())

    def is_model_loaded(self, model_key: str) -> bool:
        return model_key in self._cache

    def list_models(self) -> List[Dict[str, Any]]:
        """Catalog entries with their loaded flag."""
        return [
            {
                "key": spec.key,
                "name": spec.name,
                "source": spec.source,
                "type": spec.type,
                "input_size": list(spec.input_size),
                "classes": len(spec.classes),
                "loaded": self.is_model_loaded(spec.key),
            }
            for spec in MODELS.values()
        ]

    def clear_cache(self) -> None:
        """Clear the model cache."""
        self._cache.clear()

    def _require_known(self, model_key: str) -> None:
        if model_key not in MODELS:
            raise ModelNotFoundError(model_key)
