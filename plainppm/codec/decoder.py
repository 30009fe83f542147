from __future__ import annotations

import io
import re
from dataclasses import dataclass
from typing import IO, Iterable, Iterator, List, Optional, Tuple

from .errors import (
    BadDimensions,
    BadMagic,
    BadMaxValue,
    BadSample,
    SampleOutOfRange,
    TruncatedPayload,
)
from .tokens import Token, scan
from .types import SUPPORTED_CHANNELS, SUPPORTED_FORMATS, Image

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass
class DecodeSettings:
    channels: int = 1
    check_range: bool = False


def decode(source: IO, settings: Optional[DecodeSettings] = None) -> Image:
    """Decode a plain PPM image from a readable text or binary stream."""
    return PPMDecoder(settings).decode(_text_lines(source))


def decode_text(text: str, settings: Optional[DecodeSettings] = None) -> Image:
    return decode(io.StringIO(text), settings)


def decode_bytes(data: bytes, settings: Optional[DecodeSettings] = None) -> Image:
    return decode(io.BytesIO(data), settings)


def _text_lines(source: IO) -> Iterator[str]:
    for line in source:
        if isinstance(line, bytes):
            line = line.decode("ascii", errors="replace")
        yield line


class PPMDecoder:
    def __init__(self, settings: Optional[DecodeSettings] = None) -> None:
        self.settings = settings or DecodeSettings()
        if self.settings.channels not in SUPPORTED_CHANNELS:
            raise ValueError(f"Channels must be one of {SUPPORTED_CHANNELS}")

    def decode(self, lines: Iterable[str]) -> Image:
        tokens = scan(lines)
        magic = self._read_magic(tokens)
        width, height = self._read_dimensions(tokens, magic)
        max_value = self._read_max_value(tokens, height)
        count = int(width.text) * int(height.text) * self.settings.channels
        samples = self._read_samples(tokens, count, int(max_value.text), max_value.line)
        return Image(
            format=magic.text[:2],
            max_value=int(max_value.text),
            width=int(width.text),
            height=int(height.text),
            samples=tuple(samples),
            channels=self.settings.channels,
        )

    @staticmethod
    def _read_magic(tokens: Iterator[Token]) -> Token:
        magic = next(tokens, None)
        if magic is None:
            raise BadMagic("Missing format tag")
        if magic.text not in SUPPORTED_FORMATS:
            raise BadMagic(f"Unsupported format tag {magic.text!r}", magic.line)
        return magic

    @staticmethod
    def _read_dimensions(tokens: Iterator[Token], magic: Token) -> Tuple[Token, Token]:
        width = next(tokens, None)
        if width is None:
            raise BadDimensions("Missing dimension line")
        if width.line == magic.line:
            raise BadDimensions("Dimensions must follow the format tag on their own line", width.line)
        height = next(tokens, None)
        if height is None or height.line != width.line:
            raise BadDimensions("Missing height", width.line)
        for name, token in (("width", width), ("height", height)):
            if _parse_int(token.text) is None:
                raise BadDimensions(f"Non-numeric {name} {token.text!r}", token.line)
            if int(token.text) <= 0:
                raise BadDimensions(f"{name.capitalize()} must be positive, got {token.text}", token.line)
        return width, height

    @staticmethod
    def _read_max_value(tokens: Iterator[Token], dimensions: Token) -> Token:
        max_value = next(tokens, None)
        if max_value is None:
            raise BadMaxValue("Missing max value")
        if max_value.line == dimensions.line:
            raise BadMaxValue("Max value must be on the line after the dimensions", max_value.line)
        value = _parse_int(max_value.text)
        if value is None:
            raise BadMaxValue(f"Non-numeric max value {max_value.text!r}", max_value.line)
        if value <= 0:
            raise BadMaxValue(f"Max value must be positive, got {value}", max_value.line)
        return max_value

    def _read_samples(self, tokens: Iterator[Token], count: int, max_value: int, header_line: int) -> List[int]:
        samples: List[int] = []
        last_line = header_line
        while len(samples) < count:
            token = next(tokens, None)
            if token is None:
                raise TruncatedPayload(count, len(samples), last_line)
            last_line = token.line
            value = _parse_int(token.text)
            if value is None:
                raise BadSample(f"Non-numeric sample {token.text!r}", token.line)
            if self.settings.check_range and not 0 <= value <= max_value:
                raise SampleOutOfRange(f"Sample {value} outside [0, {max_value}]", token.line)
            samples.append(value)
        return samples


def _parse_int(text: str) -> Optional[int]:
    if not _INTEGER.fullmatch(text):
        return None
    return int(text)
