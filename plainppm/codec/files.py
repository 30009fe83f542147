from __future__ import annotations

import os
from typing import Optional

from .decoder import DecodeSettings, decode
from .encoder import EncodeSettings, encode
from .types import Image


def read_file(path: str, settings: Optional[DecodeSettings] = None) -> Image:
    """Open a path and decode it as plain PPM."""
    if not os.path.isfile(path):
        raise FileNotFoundError(f"File not found: {path}")
    with open(path, "rb") as handle:
        return decode(handle, settings)


def write_file(path: str, image: Image, settings: Optional[EncodeSettings] = None) -> None:
    # A rejected image must not leave a partial file behind.
    text = encode(image, settings)
    with open(path, "w", encoding="ascii", newline="\n") as handle:
        handle.write(text)
