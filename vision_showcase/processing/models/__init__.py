from .catalog import MODELS, COCO_CLASSES, IMAGENET_CLASSES, BENCHMARKS, ModelSpec, ModelBenchmark, metric_score, best_model
from .manager import ModelManager
from .registry import ModelRegistry

__all__ = [
    "MODELS",
    "COCO_CLASSES",
    "IMAGENET_CLASSES",
    "BENCHMARKS",
    "ModelSpec",
    "ModelBenchmark",
    "metric_score",
    "best_model",
    "ModelManager",
    "ModelRegistry",
]
