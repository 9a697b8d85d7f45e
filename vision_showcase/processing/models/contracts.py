"""
Model Data Contracts
--------------------

Interfaces between the model manager and the providers that build models.
Models here are mock stand-ins: they take an RGB image array and return
plain Python structures shaped like the browser model libraries' output.
"""

from typing import Protocol, Any
import numpy as np


class Model(Protocol):
    """
    A loaded model instance.

    Models are callable: model(image) -> raw output (format depends on model type).
    """

    def __call__(self, image: np.ndarray) -> Any:
        """
        Run inference on an image.

        Args:
            image: HxWx3 uint8 RGB array

        Returns:
            Raw model output (probabilities, detections, faces or a mask)
        """
        ...


class Provider(Protocol):
    """Builds models of one family for a catalog key."""

    def load(self, model_key: str) -> Model:
        ...
