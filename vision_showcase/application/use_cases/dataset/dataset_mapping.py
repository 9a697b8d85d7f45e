"""Mapping between dataset domain models and response DTOs."""
from dataclasses import asdict

from ....domain.models.dataset import DatasetConfig, DatasetImage
from ...dto.dataset_dto import (
    AugmentationConfigSchema,
    DatasetConfigResponse,
    DatasetImageResponse,
    PreprocessingSchema,
    ResizeSchema,
    SplitRatioSchema,
)


def to_dataset_response(config: DatasetConfig) -> DatasetConfigResponse:
    return DatasetConfigResponse(
        name=config.name,
        version=config.version,
        total_images=config.total_images,
        categories=list(config.categories),
        split_ratio=SplitRatioSchema(**asdict(config.split_ratio)),
        augmentation_config=AugmentationConfigSchema(**asdict(config.augmentation_config)),
        preprocessing=PreprocessingSchema(
            resize=ResizeSchema(
                width=config.preprocessing.width,
                height=config.preprocessing.height,
            ),
            normalize=config.preprocessing.normalize,
            grayscale=config.preprocessing.grayscale,
        ),
    )


def to_image_response(image: DatasetImage) -> DatasetImageResponse:
    annotations = None
    if image.annotations is not None:
        annotations = {
            key: [asdict(box) for box in boxes]
            for key, boxes in image.annotations.items()
        }
    return DatasetImageResponse(
        id=image.id,
        url=image.url,
        label=image.label,
        category=image.category,
        metadata=dict(image.metadata),
        annotations=annotations,
        augmentations=image.augmentations,
        preprocessed=image.preprocessed,
        validated=image.validated,
    )
