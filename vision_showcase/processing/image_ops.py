"""
Image operations
----------------

numpy/Pillow implementations of the preprocessing and augmentation steps
used by the dataset manager. Images are HxWx3 arrays; uint8 in [0, 255]
before normalization and float32 in [0, 1] after. Functions that depend on
the value range take `max_value` (255.0 or 1.0).
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
import zlib
from typing import Callable, List, Optional

# -----------------------------------------------------------------------------
# Third-party
# -----------------------------------------------------------------------------
import numpy as np
from PIL import Image

# -----------------------------------------------------------------------------
# Local
# -----------------------------------------------------------------------------
from ..domain.models.dataset import AugmentationConfig, PreprocessingConfig

ONE_HOT_CATEGORIES = ["cat", "dog", "bird", "car", "plane"]

GRAYSCALE_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float32)


# -----------------------------------------------------------------------------
# Loading
# -----------------------------------------------------------------------------

def load_image_array(path: str) -> np.ndarray:
    """Read an image file as an RGB uint8 array."""
    with Image.open(path) as image:
        return np.asarray(image.convert("RGB"), dtype=np.uint8)


def synthetic_image(image_id: str, width: int = 224, height: int = 224) -> np.ndarray:
    """
    Deterministic stand-in pixels for a dataset image that cannot be fetched.

    The same id always yields the same array: a colour gradient plus noise.
    """
    rng = np.random.default_rng(zlib.crc32(image_id.encode("utf-8")))
    base = rng.uniform(0, 255, size=3)
    ys = np.linspace(0.0, 1.0, height, dtype=np.float32)[:, None, None]
    xs = np.linspace(0.0, 1.0, width, dtype=np.float32)[None, :, None]
    gradient = base * (0.5 + 0.25 * ys + 0.25 * xs)
    noise = rng.normal(0.0, 12.0, size=(height, width, 3))
    return np.clip(gradient + noise, 0, 255).astype(np.uint8)


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def _per_channel(image: np.ndarray, fn: Callable[[Image.Image], Image.Image]) -> np.ndarray:
    """Apply a Pillow transform to each channel as a float ("F" mode) image."""
    channels = [
        np.asarray(fn(Image.fromarray(image[..., c].astype(np.float32))), dtype=np.float32)
        for c in range(image.shape[2])
    ]
    result = np.stack(channels, axis=-1)
    if image.dtype == np.uint8:
        return np.clip(result, 0, 255).astype(np.uint8)
    return result


# -----------------------------------------------------------------------------
# Preprocessing
# -----------------------------------------------------------------------------

def resize(image: np.ndarray, width: int, height: int) -> np.ndarray:
    if image.shape[1] == width and image.shape[0] == height:
        return image.copy()
    return _per_channel(image, lambda ch: ch.resize((width, height), Image.BILINEAR))


def normalize(image: np.ndarray) -> np.ndarray:
    """Scale 0-255 RGB values into [0, 1]."""
    return image.astype(np.float32) / 255.0


def to_grayscale(image: np.ndarray) -> np.ndarray:
    """Luma-weighted grayscale, replicated over the three channels."""
    gray = image[..., :3].astype(np.float32) @ GRAYSCALE_WEIGHTS
    result = np.repeat(gray[..., None], 3, axis=-1)
    if image.dtype == np.uint8:
        return np.clip(result, 0, 255).astype(np.uint8)
    return result


def preprocess(image: np.ndarray, config: PreprocessingConfig) -> np.ndarray:
    """Resize, then normalize and convert to grayscale when configured."""
    processed = resize(image, config.width, config.height)
    if config.normalize:
        processed = normalize(processed)
    if config.grayscale:
        processed = to_grayscale(processed)
    return processed


# -----------------------------------------------------------------------------
# Augmentations
# -----------------------------------------------------------------------------

def rotate(image: np.ndarray, angle: float) -> np.ndarray:
    """Rotate about the centre by `angle` degrees, keeping the original size."""
    return _per_channel(image, lambda ch: ch.rotate(angle, resample=Image.BILINEAR))


def flip(image: np.ndarray, direction: str) -> np.ndarray:
    if direction == "horizontal":
        return image[:, ::-1].copy()
    if direction == "vertical":
        return image[::-1, :].copy()
    raise ValueError(f"Unknown flip direction: {direction}")


def adjust_brightness(image: np.ndarray, factor: float, max_value: float = 255.0) -> np.ndarray:
    result = np.minimum(max_value, image.astype(np.float32) * factor)
    return result.astype(image.dtype)


def adjust_contrast(image: np.ndarray, factor: float, max_value: float = 255.0) -> np.ndarray:
    mid = 128.0 * max_value / 255.0
    result = np.clip((image.astype(np.float32) - mid) * factor + mid, 0, max_value)
    return result.astype(image.dtype)


def add_noise(
    image: np.ndarray,
    intensity: float,
    max_value: float = 255.0,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Add per-pixel uniform noise in +/- intensity/2 of the value range, shared across channels."""
    rng = rng or np.random.default_rng()
    noise = (rng.random(image.shape[:2], dtype=np.float32) - 0.5) * intensity * max_value
    result = np.clip(image.astype(np.float32) + noise[..., None], 0, max_value)
    return result.astype(image.dtype)


def random_crop(image: np.ndarray, scale: float, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """Crop a `scale` fraction of each side at a random offset and resize back to the input size."""
    if not 0 < scale <= 1:
        raise ValueError("Crop scale must be in (0, 1]")
    rng = rng or np.random.default_rng()
    height, width = image.shape[:2]
    crop_h = max(1, int(height * scale))
    crop_w = max(1, int(width * scale))
    top = int(rng.integers(0, height - crop_h + 1))
    left = int(rng.integers(0, width - crop_w + 1))
    cropped = image[top:top + crop_h, left:left + crop_w]
    return resize(cropped, width, height)


def augment(
    image: np.ndarray,
    config: AugmentationConfig,
    max_value: float = 255.0,
    rng: Optional[np.random.Generator] = None,
) -> List[np.ndarray]:
    """
    Produce the augmented copies of an image for every enabled augmentation.

    Order: rotation (+15, -15), flip (horizontal, vertical), brightness
    (1.2, 0.8), contrast (1.3, 0.7), noise (0.1), crop (0.9).
    """
    rng = rng or np.random.default_rng()
    augmented: List[np.ndarray] = []

    if config.rotation:
        augmented.append(rotate(image, 15))
        augmented.append(rotate(image, -15))

    if config.flip:
        augmented.append(flip(image, "horizontal"))
        augmented.append(flip(image, "vertical"))

    if config.brightness:
        augmented.append(adjust_brightness(image, 1.2, max_value))
        augmented.append(adjust_brightness(image, 0.8, max_value))

    if config.contrast:
        augmented.append(adjust_contrast(image, 1.3, max_value))
        augmented.append(adjust_contrast(image, 0.7, max_value))

    if config.noise:
        augmented.append(add_noise(image, 0.1, max_value, rng))

    if config.crop:
        augmented.append(random_crop(image, 0.9, rng))

    return augmented


# -----------------------------------------------------------------------------
# Training tensors
# -----------------------------------------------------------------------------

def image_to_tensor(image: np.ndarray, max_value: float = 255.0) -> np.ndarray:
    """RGB channels scaled to [0, 1] as float32, shape HxWx3."""
    return image[..., :3].astype(np.float32) / max_value


def label_to_one_hot(label: str, categories: List[str] = ONE_HOT_CATEGORIES) -> np.ndarray:
    """One-hot vector over `categories`; all zeros when the label is not among them."""
    one_hot = np.zeros(len(categories), dtype=np.float32)
    if label in categories:
        one_hot[categories.index(label)] = 1.0
    return one_hot
