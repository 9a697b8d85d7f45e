"""
Model catalog
-------------

Static description of the vision models the showcase exposes, the class
lists they predict over and the benchmark table used by the comparison view.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

# -----------------------------------------------------------------------------
# Class lists
# -----------------------------------------------------------------------------

COCO_CLASSES: List[str] = [
    "person", "bicycle", "car", "motorcycle", "airplane", "bus", "train", "truck",
    "boat", "traffic light", "fire hydrant", "stop sign", "parking meter", "bench",
    "bird", "cat", "dog", "horse", "sheep", "cow", "elephant", "bear", "zebra",
    "giraffe", "backpack", "umbrella", "handbag", "tie", "suitcase", "frisbee",
    "skis", "snowboard", "sports ball", "kite", "baseball bat", "baseball glove",
    "skateboard", "surfboard", "tennis racket", "bottle", "wine glass", "cup",
    "fork", "knife", "spoon", "bowl", "banana", "apple", "sandwich", "orange",
    "broccoli", "carrot", "hot dog", "pizza", "donut", "cake", "chair", "couch",
    "potted plant", "bed", "dining table", "toilet", "tv", "laptop", "mouse",
    "remote", "keyboard", "cell phone", "microwave", "oven", "toaster", "sink",
    "refrigerator", "book", "clock", "vase", "scissors", "teddy bear",
    "hair drier", "toothbrush",
]

# Subset of the ImageNet labels; enough for believable mock classifications.
IMAGENET_CLASSES: List[str] = [
    "tench", "goldfish", "great white shark", "tiger shark", "hammerhead",
    "electric ray", "stingray", "cock", "hen", "ostrich", "brambling",
    "goldfinch", "house finch", "junco", "indigo bunting", "robin", "bulbul",
    "jay", "magpie", "chickadee", "water ouzel", "kite", "bald eagle", "vulture",
    "great grey owl", "European fire salamander", "common newt", "eft",
    "spotted salamander", "axolotl", "bullfrog", "tree frog", "tailed frog",
    "loggerhead", "leatherback turtle", "mud turtle", "terrapin", "box turtle",
    "banded gecko", "common iguana", "American chameleon", "whiptail", "agama",
    "frilled lizard", "alligator lizard", "Gila monster", "green lizard",
    "African chameleon", "Komodo dragon", "African crocodile",
    "American alligator", "triceratops", "thunder snake", "ringneck snake",
    "hognose snake", "green snake", "golden retriever", "labrador retriever",
    "german shepherd", "beagle", "boxer", "bulldog", "poodle", "husky",
    "dalmatian", "chihuahua", "persian cat", "siamese cat", "maine coon",
    "british shorthair", "ragdoll", "bengal", "russian blue", "abyssinian",
]

# -----------------------------------------------------------------------------
# Model catalog
# -----------------------------------------------------------------------------

MODEL_TYPES = ("classification", "detection", "segmentation", "pose")


@dataclass(frozen=True)
class ModelSpec:
    key: str
    name: str
    source: str
    type: str
    input_size: Tuple[int, int]
    classes: List[str] = field(default_factory=list)


MODELS: Dict[str, ModelSpec] = {
    "mobilenet": ModelSpec(
        key="mobilenet",
        name="MobileNet",
        source="https://tfhub.dev/google/tfjs-model/imagenet/mobilenet_v3_small_100_224/classification/5/default/1",
        type="classification",
        input_size=(224, 224),
        classes=IMAGENET_CLASSES,
    ),
    "cocoSsd": ModelSpec(
        key="cocoSsd",
        name="COCO-SSD",
        source="@tensorflow-models/coco-ssd",
        type="detection",
        input_size=(640, 480),
        classes=COCO_CLASSES,
    ),
    "efficientNet": ModelSpec(
        key="efficientNet",
        name="EfficientNet",
        source="https://tfhub.dev/tensorflow/tfjs-model/efficientnet/b0/classification/1/default/1",
        type="classification",
        input_size=(224, 224),
        classes=IMAGENET_CLASSES,
    ),
    "bodyPix": ModelSpec(
        key="bodyPix",
        name="BodyPix",
        source="@tensorflow-models/body-pix",
        type="segmentation",
        input_size=(513, 513),
        classes=["background", "person"],
    ),
    "blazeFace": ModelSpec(
        key="blazeFace",
        name="BlazeFace",
        source="@tensorflow-models/blazeface",
        type="detection",
        input_size=(128, 128),
        classes=["face"],
    ),
}

# -----------------------------------------------------------------------------
# Benchmarks
# -----------------------------------------------------------------------------

BENCHMARK_METRICS = ("accuracy", "speed", "size", "memory", "fps")


@dataclass(frozen=True)
class ModelBenchmark:
    """Published figures for one architecture: speed in ms, size in MB, memory in MB."""
    name: str
    category: str
    accuracy: float
    speed: float
    size: float
    memory: float
    fps: float
    map: float
    description: str
    strengths: List[str]
    weaknesses: List[str]
    use_cases: List[str]


BENCHMARKS: List[ModelBenchmark] = [
    ModelBenchmark(
        name="YOLO v8",
        category="Object Detection",
        accuracy=94.2, speed=45, size=6.2, memory=512, fps=67, map=0.892,
        description="Ultra-fast real-time object detection",
        strengths=["Real-time performance", "Good accuracy", "Lightweight"],
        weaknesses=["Lower accuracy than R-CNN", "Limited for small objects"],
        use_cases=["Live detection", "Mobile apps", "Edge devices"],
    ),
    ModelBenchmark(
        name="EfficientDet",
        category="Object Detection",
        accuracy=96.8, speed=89, size=15.1, memory=1024, fps=34, map=0.934,
        description="Balanced efficiency and accuracy",
        strengths=["High accuracy", "Efficient architecture", "Scalable"],
        weaknesses=["Slower than YOLO", "More complex"],
        use_cases=["Production systems", "Batch processing", "High accuracy needs"],
    ),
    ModelBenchmark(
        name="Faster R-CNN",
        category="Object Detection",
        accuracy=98.1, speed=156, size=42.3, memory=2048, fps=18, map=0.967,
        description="Highest accuracy object detection",
        strengths=["Highest accuracy", "Excellent for small objects", "Research standard"],
        weaknesses=["Slow inference", "Large model size", "High memory usage"],
        use_cases=["Research", "Offline processing", "Critical applications"],
    ),
    ModelBenchmark(
        name="MobileNet SSD",
        category="Object Detection",
        accuracy=89.7, speed=23, size=2.1, memory=256, fps=89, map=0.834,
        description="Mobile-optimized detection",
        strengths=["Extremely fast", "Tiny size", "Low memory"],
        weaknesses=["Lower accuracy", "Limited features", "Simple architecture"],
        use_cases=["Mobile devices", "IoT", "Resource-constrained environments"],
    ),
    ModelBenchmark(
        name="ResNet-50",
        category="Classification",
        accuracy=94.8, speed=67, size=25.6, memory=768, fps=45, map=0.948,
        description="Standard classification backbone",
        strengths=["Proven architecture", "Transfer learning", "Stable training"],
        weaknesses=["Not optimized for speed", "Large size", "Older architecture"],
        use_cases=["Image classification", "Transfer learning", "Feature extraction"],
    ),
    ModelBenchmark(
        name="Vision Transformer",
        category="Classification",
        accuracy=97.3, speed=134, size=86.4, memory=1536, fps=23, map=0.973,
        description="Transformer-based vision model",
        strengths=["State-of-the-art accuracy", "Attention mechanism", "Scalable"],
        weaknesses=["Very slow", "Huge model", "Requires lots of data"],
        use_cases=["Research", "High-accuracy classification", "Large datasets"],
    ),
]


def metric_score(benchmark: ModelBenchmark, metric: str) -> float:
    """
    Score a benchmark on one metric so that higher is always better.

    Unknown metrics fall back to accuracy.
    """
    if metric == "speed":
        return 200 - benchmark.speed
    if metric == "size":
        return 100 - (benchmark.size / 100) * 100
    if metric == "memory":
        return 100 - (benchmark.memory / 2048) * 100
    if metric == "fps":
        return benchmark.fps
    return benchmark.accuracy


def best_model(metric: str, benchmarks: List[ModelBenchmark] = BENCHMARKS) -> ModelBenchmark:
    """Highest-scoring benchmark for a metric; the first one wins ties."""
    best = benchmarks[0]
    for current in benchmarks[1:]:
        if metric_score(current, metric) > metric_score(best, metric):
            best = current
    return best
