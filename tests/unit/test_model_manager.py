"""
Unit tests for the model catalog, registry and ModelManager.
"""
import numpy as np
import pytest

from vision_showcase.core.exceptions import ModelNotFoundError, ValidationError
from vision_showcase.processing.image_ops import synthetic_image
from vision_showcase.processing.models import catalog
from vision_showcase.processing.models.manager import ModelManager
from vision_showcase.processing.models.providers import MockClassifierProvider
from vision_showcase.processing.models.registry import get_provider


@pytest.fixture
def manager():
    return ModelManager()


@pytest.fixture
def image():
    return synthetic_image("photo", 64, 48)


class TestCatalog:
    """Tests for benchmark scoring"""

    def test_coco_has_80_classes(self):
        assert len(catalog.COCO_CLASSES) == 80

    @pytest.mark.parametrize(
        "metric,expected",
        [
            ("accuracy", "Faster R-CNN"),
            ("speed", "MobileNet SSD"),
            ("size", "MobileNet SSD"),
            ("memory", "MobileNet SSD"),
            ("fps", "MobileNet SSD"),
        ],
    )
    def test_best_model_per_metric(self, metric, expected):
        assert catalog.best_model(metric).name == expected

    def test_metric_scores(self):
        yolo = catalog.BENCHMARKS[0]
        assert catalog.metric_score(yolo, "speed") == 200 - 45
        assert catalog.metric_score(yolo, "memory") == pytest.approx(100 - 512 / 2048 * 100)
        assert catalog.metric_score(yolo, "unknown") == yolo.accuracy


class TestRegistry:
    def test_prefix_match(self, manager):
        assert get_provider("mobilenet_v2") is MockClassifierProvider

    def test_no_match(self, manager):
        assert get_provider("zzz") is None


class TestModelManager:
    """Tests for ModelManager"""

    def test_load_model_caches(self, manager):
        first = manager.load_model("mobilenet")
        assert manager.load_model("mobilenet") is first
        assert manager.is_model_loaded("mobilenet")
        assert manager.get_loaded_models() == ["mobilenet"]

    def test_unknown_model(self, manager):
        with pytest.raises(ModelNotFoundError):
            manager.load_model("yolo")

    def test_classify_top_k(self, manager, image):
        mobilenet = manager.classify_image("mobilenet", image)
        efficientnet = manager.classify_image("efficientNet", image)

        assert len(mobilenet) == 3
        assert len(efficientnet) == 5
        confidences = [p["confidence"] for p in efficientnet]
        assert confidences == sorted(confidences, reverse=True)

    def test_classify_is_deterministic_per_image(self, manager, image):
        assert manager.classify_image("mobilenet", image) == manager.classify_image("mobilenet", image.copy())

    def test_classify_with_detection_model_rejected(self, manager, image):
        with pytest.raises(ValidationError):
            manager.classify_image("cocoSsd", image)

    def test_classify_with_unknown_model(self, manager, image):
        with pytest.raises(ModelNotFoundError):
            manager.classify_image("resnet", image)

    def test_detect_objects_inside_image(self, manager, image):
        detections = manager.detect_objects("cocoSsd", image)

        assert 1 <= len(detections) <= 4
        for detection in detections:
            x, y, w, h = detection["bbox"]
            assert detection["class"] in catalog.COCO_CLASSES
            assert 0 <= x and x + w <= 64.1
            assert 0 <= y and y + h <= 48.1

    def test_detect_objects_only_coco(self, manager, image):
        with pytest.raises(ValidationError):
            manager.detect_objects("mobilenet", image)

    def test_detect_faces(self, manager, image):
        faces = manager.detect_faces(image)
        assert len(faces) <= 2
        for face in faces:
            assert len(face["landmarks"]) == 6
            assert 0.8 <= face["confidence"] <= 0.99

    def test_segment_person(self, manager, image):
        mask = manager.segment_person(image)
        assert (mask["width"], mask["height"]) == (64, 48)
        assert np.asarray(mask["data"]).shape == (48, 64)

    def test_list_models(self, manager):
        manager.load_model("blazeFace")
        models = {info["key"]: info for info in manager.list_models()}

        assert set(models) == {"mobilenet", "cocoSsd", "efficientNet", "bodyPix", "blazeFace"}
        assert models["blazeFace"]["loaded"] is True
        assert models["mobilenet"]["loaded"] is False
        assert models["cocoSsd"]["classes"] == 80

    def test_clear_cache(self, manager):
        manager.load_model("mobilenet")
        manager.clear_cache()
        assert manager.get_loaded_models() == []
