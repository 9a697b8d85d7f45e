"""
Dataset manager for large-scale training simulation.

Registers dataset configurations, serves synthetic image batches from them,
preprocesses and augments those batches with numpy/Pillow and keeps an
image cache the training loop draws tensors from.
"""
import asyncio
import logging
import random
import threading
from collections import OrderedDict
from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from ...core.config import get_settings
from ...core.exceptions import DatasetNotFoundError
from ...domain.models.dataset import BoundingBoxAnnotation, DatasetConfig, DatasetImage, TrainingBatch
from ...domain.repositories.dataset_repository import DatasetRepository
from ...processing import image_ops
from ...processing.image_worker import handle_message

logger = logging.getLogger(__name__)

PLACEHOLDER_URL = "/placeholder.svg"
CACHE_EVICTION_COUNT = 500

DATASET_BASE_URLS = {
    "ImageNet": "https://image-net.org/data/",
    "COCO": "https://images.cocodataset.org/",
    "Open Images": "https://storage.googleapis.com/openimages/",
    "CIFAR-100": "https://www.cs.toronto.edu/~kriz/cifar-100-python/",
}

POPULAR_DATASETS: List[Dict[str, Any]] = [
    {
        "name": "ImageNet",
        "total_images": 1_000_000,
        "categories": [
            "tench", "goldfish", "great_white_shark", "tiger_shark", "hammerhead",
            "electric_ray", "stingray", "cock", "hen", "ostrich", "brambling",
            "goldfinch", "house_finch", "junco", "indigo_bunting", "robin",
        ],
    },
    {
        "name": "COCO",
        "total_images": 330_000,
        "categories": [
            "person", "bicycle", "car", "motorcycle", "airplane", "bus", "train",
            "truck", "boat", "traffic_light", "fire_hydrant", "stop_sign",
            "parking_meter", "bench", "bird", "cat", "dog", "horse", "sheep", "cow",
            "elephant", "bear", "zebra", "giraffe", "backpack", "umbrella",
        ],
    },
    {
        "name": "Open Images",
        "total_images": 9_000_000,
        "categories": [
            "Accordion", "Adhesive_tape", "Aircraft", "Airplane", "Alarm_clock",
            "Alpaca", "Ambulance", "Animal", "Ant", "Antelope", "Apple", "Armadillo",
            "Artichoke", "Auto_part", "Axe", "Backpack", "Bagel", "Baked_goods",
        ],
    },
    {
        "name": "CIFAR-100",
        "total_images": 60_000,
        "categories": [
            "apple", "aquarium_fish", "baby", "bear", "beaver", "bed", "bee",
            "beetle", "bicycle", "bottle", "bowl", "boy", "bridge", "bus",
            "butterfly", "camel", "can", "castle", "caterpillar", "cattle",
        ],
    },
]

IMAGE_METADATA = {"width": 224, "height": 224, "size": 150000, "format": "jpeg", "quality": 0.9}


class DatasetManagerService:
    """Dataset registry plus batch loading, preprocessing and the processed-image cache."""

    def __init__(
        self,
        dataset_repository: DatasetRepository,
        image_cache_limit: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.dataset_repository = dataset_repository
        self.image_cache_limit = (
            image_cache_limit if image_cache_limit is not None else get_settings().image_cache_limit
        )
        self._rng = rng or random.Random()
        self._np_rng = np.random.default_rng(self._rng.randrange(2**32))
        self.image_cache: "OrderedDict[str, np.ndarray]" = OrderedDict()
        self.cache_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    async def register_dataset(self, name: str, total_images: int, categories: List[str]) -> DatasetConfig:
        """
        Register (or replace) a dataset with the default split, augmentation and preprocessing settings.

        Raises:
            ValueError: If the name is empty, total_images negative or categories empty
        """
        config = DatasetConfig(name=name, total_images=total_images, categories=list(categories))
        await self.dataset_repository.save(config)
        logger.info(f"Registered dataset {name} ({total_images} images, {len(categories)} categories)")
        return config

    async def load_popular_datasets(self) -> List[DatasetConfig]:
        return [
            await self.register_dataset(dataset["name"], dataset["total_images"], dataset["categories"])
            for dataset in POPULAR_DATASETS
        ]

    async def list_datasets(self) -> List[DatasetConfig]:
        return await self.dataset_repository.find_all()

    async def get_dataset(self, name: str) -> DatasetConfig:
        config = await self.dataset_repository.find_by_name(name)
        if config is None:
            raise DatasetNotFoundError(name)
        return config

    # ------------------------------------------------------------------
    # Batch loading
    # ------------------------------------------------------------------

    @staticmethod
    def generate_image_url(dataset_name: str, index: int) -> str:
        base_url = DATASET_BASE_URLS.get(dataset_name, PLACEHOLDER_URL)
        return f"{base_url}?id={index}&width=224&height=224"

    def _coco_annotations(self) -> Dict[str, List[BoundingBoxAnnotation]]:
        return {
            "bounding_boxes": [
                BoundingBoxAnnotation(
                    x=self._rng.random() * 100,
                    y=self._rng.random() * 100,
                    width=50 + self._rng.random() * 100,
                    height=50 + self._rng.random() * 100,
                    label="person",
                    confidence=0.9 + self._rng.random() * 0.1,
                )
            ]
        }

    async def load_dataset_batch(
        self,
        dataset_name: str,
        batch_size: int = 32,
        start_index: int = 0,
    ) -> List[DatasetImage]:
        """
        Build the images [start_index, start_index + batch_size) of a dataset, never past its end.

        Raises:
            DatasetNotFoundError: If the dataset is not registered
        """
        dataset = await self.get_dataset(dataset_name)
        end_index = min(start_index + batch_size, dataset.total_images)
        categories = dataset.categories

        images = []
        for i in range(start_index, end_index):
            category = categories[i % len(categories)]
            image = DatasetImage(
                id=f"{dataset_name}_{i}",
                url=self.generate_image_url(dataset_name, i),
                label=category,
                category=category,
                metadata=dict(IMAGE_METADATA),
            )
            if dataset_name == "COCO":
                image.annotations = self._coco_annotations()
            images.append(image)
        return images

    # ------------------------------------------------------------------
    # Preprocessing
    # ------------------------------------------------------------------

    def _load_pixels(self, image: DatasetImage) -> np.ndarray:
        width = int(image.metadata.get("width", 224))
        height = int(image.metadata.get("height", 224))
        return image_ops.synthetic_image(image.id, width, height)

    def preprocess_batch(self, images: List[DatasetImage], config: DatasetConfig) -> List[DatasetImage]:
        """
        Preprocess images and add one augmented copy per augmentation output.

        Processed pixels go into the image cache under the image id. An image
        that fails is logged and left out. Blocking; the training loop runs it
        in a worker thread.
        """
        enabled = config.augmentation_config.enabled()
        max_value = 1.0 if config.preprocessing.normalize else 255.0
        processed_images: List[DatasetImage] = []

        for image in images:
            try:
                pixels = self._load_pixels(image)
                processed = image_ops.preprocess(pixels, config.preprocessing)
                augmented = image_ops.augment(processed, config.augmentation_config, max_value, self._np_rng)
            except (ValueError, OSError) as e:
                logger.error(f"Failed to preprocess image {image.id}: {e}")
                continue

            entries = {image.id: processed}
            processed_images.append(
                replace(image, preprocessed=True, validated=True, augmentations=list(enabled))
            )

            for index, augmented_pixels in enumerate(augmented):
                augmented_image = replace(
                    image,
                    id=f"{image.id}_aug_{index}",
                    preprocessed=True,
                    validated=True,
                    augmentations=[f"augmentation_{index}"],
                )
                entries[augmented_image.id] = augmented_pixels
                processed_images.append(augmented_image)

            with self.cache_lock:
                self.image_cache.update(entries)

        return processed_images

    def prepare_batch_for_training(
        self,
        batch: TrainingBatch,
        max_value: float = 1.0,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Stack cached pixels and one-hot labels for a batch.

        Images missing from the cache are skipped.

        Returns:
            (inputs of shape NxHxWx3 in [0, 1], labels of shape Nx5)
        """
        inputs = []
        labels = []
        for image in batch.images:
            with self.cache_lock:
                pixels = self.image_cache.get(image.id)
            if pixels is None:
                continue
            inputs.append(image_ops.image_to_tensor(pixels, max_value))
            labels.append(image_ops.label_to_one_hot(image.label))

        if not inputs:
            return np.zeros((0, 0, 0, 3), dtype=np.float32), np.zeros((0, len(image_ops.ONE_HOT_CATEGORIES)), dtype=np.float32)
        return np.stack(inputs), np.stack(labels)

    def cleanup_memory(self) -> int:
        """
        Evict the oldest cached images, CACHE_EVICTION_COUNT at a time, until
        the cache is back within its limit. Returns how many were dropped.
        """
        dropped = 0
        with self.cache_lock:
            while len(self.image_cache) > self.image_cache_limit:
                excess = len(self.image_cache) - self.image_cache_limit
                for _ in range(min(CACHE_EVICTION_COUNT, excess)):
                    self.image_cache.popitem(last=False)
                    dropped += 1
            remaining = len(self.image_cache)
        if dropped:
            logger.debug(f"Evicted {dropped} cached images, {remaining} remain")
        return dropped

    def cache_usage(self) -> Dict[str, int]:
        with self.cache_lock:
            cache_bytes = sum(pixels.nbytes for pixels in self.image_cache.values())
            cached_images = len(self.image_cache)
        return {
            "cached_images": cached_images,
            "cache_bytes": int(cache_bytes),
            "cache_limit": self.image_cache_limit,
        }


    # ------------------------------------------------------------------
    # Worker
    # ------------------------------------------------------------------

    async def run_worker(self, message: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Send a message to the image worker off the event loop and log what it reports."""
        replies = await asyncio.to_thread(handle_message, message)
        for reply in replies:
            if reply["type"] == "batch_processed":
                data = reply["data"]
                logger.debug(
                    f"Batch {data.get('batch_id')} processed by worker: "
                    f"{len(data.get('processed_images', []))} images in {data.get('processing_time', 0):.0f} ms"
                )
            elif reply["type"] == "error":
                logger.error(f"Worker error: {reply['data']}")
        return replies
