from __future__ import annotations

import io
from dataclasses import dataclass
from typing import IO, Iterable, Iterator, List, Optional

from .errors import InvalidImage
from .types import MAX_LINE_LENGTH, Image


@dataclass
class EncodeSettings:
    max_line_length: Optional[int] = MAX_LINE_LENGTH
    check_range: bool = False


def encode(image: Image, settings: Optional[EncodeSettings] = None) -> str:
    """Encode an image as plain PPM text."""
    return "".join(PPMEncoder(settings).iter_lines(image))


def encode_to(
    image: Image,
    sink: IO,
    settings: Optional[EncodeSettings] = None,
    binary: Optional[bool] = None,
) -> None:
    """Write an image to a text or binary stream.

    When ``binary`` is None, sinks deriving from ``io.TextIOBase`` receive
    ``str`` and every other sink receives ASCII bytes. Pass ``binary``
    explicitly for text sinks that do not derive from ``io.TextIOBase``.
    """
    if binary is None:
        binary = not isinstance(sink, io.TextIOBase)
    for line in PPMEncoder(settings).iter_lines(image):
        sink.write(line.encode("ascii") if binary else line)


class PPMEncoder:
    def __init__(self, settings: Optional[EncodeSettings] = None) -> None:
        self.settings = settings or EncodeSettings()

    def iter_lines(self, image: Image) -> Iterator[str]:
        """Yield newline-terminated output lines after validating the image."""
        self.validate(image)
        yield f"{image.format}\n"
        yield f"{image.width} {image.height}\n"
        yield f"{image.max_value}\n"
        for row in image.rows():
            for line in wrap_samples(row, self.settings.max_line_length):
                yield line + "\n"

    def validate(self, image: Image) -> None:
        image.validate()
        if self.settings.check_range and not image.in_range():
            raise InvalidImage(f"Samples must lie in [0, {image.max_value}]")


def wrap_samples(values: Iterable[int], max_length: Optional[int]) -> List[str]:
    """Join samples with spaces, breaking lines before they exceed max_length."""
    lines: List[str] = []
    current = ""
    for value in values:
        text = str(value)
        if not current:
            current = text
        elif max_length and len(current) + 1 + len(text) > max_length:
            lines.append(current)
            current = text
        else:
            current += " " + text
    if current:
        lines.append(current)
    return lines
