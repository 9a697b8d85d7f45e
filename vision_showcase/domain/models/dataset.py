# Standard library imports
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any


@dataclass
class SplitRatio:
    """Train/validation/test split of a dataset"""
    train: float = 0.8
    validation: float = 0.15
    test: float = 0.05

    def __post_init__(self) -> None:
        if abs(self.train + self.validation + self.test - 1.0) > 1e-6:
            raise ValueError("Split ratios must add up to 1.0")


@dataclass
class AugmentationConfig:
    """Which augmentations run during preprocessing"""
    rotation: bool = True
    flip: bool = True
    brightness: bool = True
    contrast: bool = True
    noise: bool = True
    crop: bool = True

    def enabled(self) -> List[str]:
        """Names of the enabled augmentations, in declaration order."""
        return [name for name, on in vars(self).items() if on]


@dataclass
class PreprocessingConfig:
    """Resize / normalize / grayscale settings applied before augmentation"""
    width: int = 224
    height: int = 224
    normalize: bool = True
    grayscale: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Resize dimensions must be positive")


@dataclass
class DatasetConfig:
    """
    Pure domain model for a registered training dataset.
    """
    name: str
    total_images: int
    categories: List[str]
    version: str = "1.0.0"
    split_ratio: SplitRatio = field(default_factory=SplitRatio)
    augmentation_config: AugmentationConfig = field(default_factory=AugmentationConfig)
    preprocessing: PreprocessingConfig = field(default_factory=PreprocessingConfig)

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.name or len(self.name.strip()) < 1:
            raise ValueError("Dataset name is required")
        if self.total_images < 0:
            raise ValueError("Total images cannot be negative")
        if not self.categories:
            raise ValueError("Dataset needs at least one category")


@dataclass
class BoundingBoxAnnotation:
    x: float
    y: float
    width: float
    height: float
    label: str
    confidence: float


@dataclass
class DatasetImage:
    """One image of a dataset batch, before or after preprocessing"""
    id: str
    url: str
    label: str
    category: str
    metadata: Dict[str, Any] = field(default_factory=dict)
    annotations: Optional[Dict[str, List[BoundingBoxAnnotation]]] = None
    augmentations: Optional[List[str]] = None
    preprocessed: bool = False
    validated: bool = False


@dataclass
class TrainingBatch:
    """A batch handed to the (mock) model for one training step"""
    id: str
    images: List[DatasetImage]
    batch_size: int
    epoch: int
    processed: bool = False
    start_time: Optional[float] = None
    end_time: Optional[float] = None
    accuracy: Optional[float] = None
    loss: Optional[float] = None
