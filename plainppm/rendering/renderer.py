from __future__ import annotations

from typing import List

from PIL import Image as PILImage
from PIL import ImageOps

from ..codec.errors import InvalidImage
from ..codec.types import DEFAULT_MAX_VALUE, Image

MODES = {1: "L", 3: "RGB"}


def scale_sample(value: int, max_value: int, target: int = 255) -> int:
    """Rescale a sample to [0, target], clamping out-of-range input."""
    value = max(0, min(max_value, value))
    return (value * target + max_value // 2) // max_value


def image_to_pil(image: Image) -> PILImage.Image:
    image.validate()
    data = bytes(scale_sample(value, image.max_value) for value in image.samples)
    return PILImage.frombytes(MODES[image.channels], (image.width, image.height), data)


def pil_to_image(img: PILImage.Image, channels: int = 1, max_value: int = DEFAULT_MAX_VALUE) -> Image:
    mode = MODES.get(channels)
    if mode is None:
        raise InvalidImage(f"Channels must be one of {sorted(MODES)}")
    if img.mode != mode:
        img = img.convert(mode)
    samples: List[int] = list(img.tobytes())
    if max_value != 255:
        samples = [scale_sample(value, 255, max_value) for value in samples]
    result = Image("P3", max_value, img.width, img.height, tuple(samples), channels)
    result.validate()
    return result


def load_raster(path: str, channels: int = 1, max_value: int = DEFAULT_MAX_VALUE) -> Image:
    with PILImage.open(path) as img:
        img = ImageOps.exif_transpose(img)
        return pil_to_image(img.copy(), channels, max_value)


def save_raster(image: Image, path: str) -> None:
    image_to_pil(image).save(path)
