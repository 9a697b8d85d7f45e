"""Identifier helpers."""
import random
import string
from typing import Optional

from .datetime_utils import now_ms

_ALPHABET = string.ascii_lowercase + string.digits


def random_suffix(length: int = 9, rng: Optional[random.Random] = None) -> str:
    """Random lowercase base-36 string."""
    rng = rng or random
    return "".join(rng.choice(_ALPHABET) for _ in range(length))


def prefixed_id(prefix: str, rng: Optional[random.Random] = None) -> str:
    """Id of the form "<prefix>_<epoch_ms>_<9 random base-36 chars>"."""
    return f"{prefix}_{now_ms()}_{random_suffix(rng=rng)}"
