from __future__ import annotations

import random
from typing import Optional

from .codec.errors import InvalidImage
from .codec.types import DEFAULT_MAX_VALUE, Image


def random_image(
    width: int,
    height: int,
    max_value: int = DEFAULT_MAX_VALUE,
    channels: int = 1,
    seed: Optional[int] = None,
) -> Image:
    """Build an image with uniformly random samples in [0, max_value]."""
    if width <= 0:
        raise InvalidImage(f"Width must be positive, got {width}")
    if height <= 0:
        raise InvalidImage(f"Height must be positive, got {height}")
    if max_value <= 0:
        raise InvalidImage(f"Max value must be positive, got {max_value}")
    rng = random.Random(seed)
    samples = tuple(rng.randint(0, max_value) for _ in range(width * height * channels))
    image = Image("P3", max_value, width, height, samples, channels)
    image.validate()
    return image
