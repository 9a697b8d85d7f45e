"""
Mock Segmenter Provider
-----------------------

Person segmentation stand-in (BodyPix). Produces a binary mask with an
elliptical "person" region.
"""

from typing import Any, Dict

import numpy as np

from .seeding import seeded_rng


class MockPersonSegmenter:
    """Returns {"width", "height", "data"} where data is a HxW uint8 mask (1 = person)."""

    def __call__(self, image: np.ndarray) -> Dict[str, Any]:
        rng = seeded_rng(image, "segmenter")
        height, width = image.shape[:2]
        cy = height * rng.uniform(0.4, 0.6)
        cx = width * rng.uniform(0.4, 0.6)
        ry = height * rng.uniform(0.2, 0.4)
        rx = width * rng.uniform(0.1, 0.25)

        ys, xs = np.ogrid[:height, :width]
        score = 1.0 - (((ys - cy) / ry) ** 2 + ((xs - cx) / rx) ** 2)
        mask = (score > 0).astype(np.uint8)
        return {"width": width, "height": height, "data": mask}


class MockSegmenterProvider:
    def load(self, model_key: str) -> MockPersonSegmenter:
        return MockPersonSegmenter()
