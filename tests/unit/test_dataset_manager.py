"""
Unit tests for DatasetManagerService.
"""
import random

import numpy as np
import pytest

from vision_showcase.application.services.dataset_manager import (
    CACHE_EVICTION_COUNT,
    POPULAR_DATASETS,
    DatasetManagerService,
)
from vision_showcase.core.exceptions import DatasetNotFoundError
from vision_showcase.domain.models.dataset import AugmentationConfig, PreprocessingConfig, TrainingBatch


def _manager(repository, cache_limit: int = 1000) -> DatasetManagerService:
    return DatasetManagerService(repository, image_cache_limit=cache_limit, rng=random.Random(3))


class TestRegistry:
    """Tests for dataset registration and lookup"""

    @pytest.mark.asyncio
    async def test_register_uses_defaults(self, dataset_repository):
        manager = _manager(dataset_repository)
        config = await manager.register_dataset("pets", 100, ["cat", "dog"])

        assert config.version == "1.0.0"
        assert config.split_ratio.train == 0.8
        assert config.augmentation_config.enabled() == [
            "rotation", "flip", "brightness", "contrast", "noise", "crop",
        ]
        assert (config.preprocessing.width, config.preprocessing.height) == (224, 224)
        assert (await manager.get_dataset("pets")).total_images == 100

    @pytest.mark.asyncio
    async def test_register_rejects_empty_categories(self, dataset_repository):
        manager = _manager(dataset_repository)
        with pytest.raises(ValueError):
            await manager.register_dataset("pets", 10, [])

    @pytest.mark.asyncio
    async def test_popular_datasets(self, dataset_repository):
        manager = _manager(dataset_repository)
        loaded = await manager.load_popular_datasets()
        assert [config.name for config in loaded] == [d["name"] for d in POPULAR_DATASETS]
        assert len(await manager.list_datasets()) == 4

    @pytest.mark.asyncio
    async def test_unknown_dataset(self, dataset_repository):
        manager = _manager(dataset_repository)
        with pytest.raises(DatasetNotFoundError):
            await manager.get_dataset("missing")


class TestLoadDatasetBatch:
    """Tests for load_dataset_batch"""

    @pytest.mark.asyncio
    async def test_batch_stops_at_dataset_end(self, dataset_repository):
        manager = _manager(dataset_repository)
        await manager.register_dataset("small", 5, ["cat", "dog"])

        images = await manager.load_dataset_batch("small", batch_size=4, start_index=3)

        assert [image.id for image in images] == ["small_3", "small_4"]
        assert [image.label for image in images] == ["dog", "cat"]
        assert images[0].url == "/placeholder.svg?id=3&width=224&height=224"
        assert images[0].annotations is None

    @pytest.mark.asyncio
    async def test_coco_images_get_bounding_boxes(self, dataset_repository):
        manager = _manager(dataset_repository)
        await manager.load_popular_datasets()

        images = await manager.load_dataset_batch("COCO", batch_size=2)

        assert images[0].url.startswith("https://images.cocodataset.org/")
        box = images[0].annotations["bounding_boxes"][0]
        assert box.label == "person"
        assert 0.9 <= box.confidence <= 1.0


class TestPreprocessing:
    """Tests for preprocess_batch, tensors and cache cleanup"""

    @pytest.mark.asyncio
    async def test_preprocess_adds_augmented_copies(self, dataset_repository):
        manager = _manager(dataset_repository)
        config = await manager.register_dataset("pets", 2, ["cat", "dog"])
        config.preprocessing = PreprocessingConfig(width=16, height=16)
        images = await manager.load_dataset_batch("pets", batch_size=2)

        processed = manager.preprocess_batch(images, config)

        assert len(processed) == 2 * 11
        assert processed[0].preprocessed and processed[0].validated
        assert processed[1].id == "pets_0_aug_0"
        assert processed[1].augmentations == ["augmentation_0"]
        assert manager.image_cache["pets_0"].shape == (16, 16, 3)
        assert images[0].preprocessed is False

    @pytest.mark.asyncio
    async def test_preprocess_without_augmentation(self, dataset_repository):
        manager = _manager(dataset_repository)
        config = await manager.register_dataset("pets", 1, ["cat"])
        config.preprocessing = PreprocessingConfig(width=8, height=8)
        config.augmentation_config = AugmentationConfig(
            rotation=False, flip=False, brightness=False, contrast=False, noise=False, crop=False,
        )
        images = await manager.load_dataset_batch("pets", batch_size=1)

        processed = manager.preprocess_batch(images, config)

        assert len(processed) == 1
        assert processed[0].augmentations == []

    @pytest.mark.asyncio
    async def test_prepare_batch_for_training(self, dataset_repository):
        manager = _manager(dataset_repository)
        config = await manager.register_dataset("pets", 2, ["cat", "horse"])
        config.preprocessing = PreprocessingConfig(width=8, height=8)
        images = await manager.load_dataset_batch("pets", batch_size=2)
        processed = manager.preprocess_batch(images, config)[:1] + [images[1]]
        processed[1].id = "not_cached"

        inputs, labels = manager.prepare_batch_for_training(
            TrainingBatch(id="batch_1_0", images=processed, batch_size=2, epoch=1)
        )

        assert inputs.shape == (1, 8, 8, 3)
        assert inputs.min() >= 0.0 and inputs.max() <= 1.0
        np.testing.assert_array_equal(labels[0], [1, 0, 0, 0, 0])

    def test_cleanup_under_limit_keeps_cache(self, dataset_repository):
        manager = _manager(dataset_repository, cache_limit=10)
        for i in range(10):
            manager.image_cache[f"img_{i}"] = np.zeros((1, 1, 3))
        assert manager.cleanup_memory() == 0
        assert len(manager.image_cache) == 10

    def test_cleanup_drops_oldest(self, dataset_repository):
        manager = _manager(dataset_repository, cache_limit=10)
        for i in range(CACHE_EVICTION_COUNT + 20):
            manager.image_cache[f"img_{i}"] = np.zeros((1, 1, 3))

        dropped = manager.cleanup_memory()

        assert dropped == CACHE_EVICTION_COUNT + 10
        assert len(manager.image_cache) == 10
        assert next(iter(manager.image_cache)) == f"img_{CACHE_EVICTION_COUNT + 10}"

    def test_cleanup_evicts_in_rounds_until_within_limit(self, dataset_repository):
        manager = _manager(dataset_repository, cache_limit=25)
        total = CACHE_EVICTION_COUNT * 3 + 7
        for i in range(total):
            manager.image_cache[f"img_{i}"] = np.zeros((1, 1, 3))

        assert manager.cleanup_memory() == total - 25
        assert list(manager.image_cache) == [f"img_{i}" for i in range(total - 25, total)]

    def test_cache_usage(self, dataset_repository):
        manager = _manager(dataset_repository, cache_limit=5)
        manager.image_cache["a"] = np.zeros((2, 2, 3), dtype=np.float32)
        manager.image_cache["b"] = np.zeros((2, 2, 3), dtype=np.float32)

        assert manager.cache_usage() == {"cached_images": 2, "cache_bytes": 96, "cache_limit": 5}


class TestRunWorker:
    """Tests for the worker bridge"""

    @pytest.mark.asyncio
    async def test_worker_replies_returned(self, dataset_repository):
        manager = _manager(dataset_repository)
        replies = await manager.run_worker({
            "type": "process_batch",
            "data": {"batch_id": "b1", "images": [{"id": "a"}, {"id": "b"}]},
        })
        assert replies[-1]["type"] == "batch_processed"
        assert replies[-1]["data"]["batch_id"] == "b1"

    @pytest.mark.asyncio
    async def test_worker_error_returned(self, dataset_repository):
        manager = _manager(dataset_repository)
        replies = await manager.run_worker({"type": "explode", "data": {}})
        assert replies == [{"type": "error", "data": "Unknown message type: explode"}]
