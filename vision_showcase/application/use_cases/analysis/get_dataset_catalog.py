"""Use case for the static dataset catalog shown next to the upload forms."""
from typing import Dict

from ...dto.analysis_dto import DatasetCatalogEntry

DATASET_CATALOG: Dict[str, Dict] = {
    "imagenet": {"name": "ImageNet", "categories": 1000, "images": "14M+"},
    "cifar10": {"name": "CIFAR-10", "categories": 10, "images": "60K"},
    "coco": {"name": "COCO", "categories": 80, "images": "330K"},
    "pascal": {"name": "Pascal VOC", "categories": 20, "images": "11K"},
    "celeba": {"name": "CelebA", "categories": 40, "images": "200K+"},
}


class GetDatasetCatalogUseCase:
    async def execute(self) -> Dict[str, DatasetCatalogEntry]:
        return {key: DatasetCatalogEntry(**entry) for key, entry in DATASET_CATALOG.items()}
