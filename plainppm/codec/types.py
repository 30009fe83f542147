from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence, Tuple

from .errors import InvalidImage

SUPPORTED_FORMATS = ("P3",)
SUPPORTED_CHANNELS = (1, 3)
DEFAULT_MAX_VALUE = 255
MAX_LINE_LENGTH = 70


@dataclass(frozen=True)
class Image:
    """Row-major integer sample buffer with its PPM header fields."""

    format: str
    max_value: int
    width: int
    height: int
    samples: Tuple[int, ...] = field(repr=False)
    channels: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.samples, tuple):
            object.__setattr__(self, "samples", tuple(self.samples))

    @property
    def sample_count(self) -> int:
        """Return the number of samples the header promises."""
        return self.width * self.height * self.channels

    @property
    def row_length(self) -> int:
        return self.width * self.channels

    def validate(self) -> None:
        """Validate header fields and payload length."""
        for name in ("width", "height", "max_value", "channels"):
            value = getattr(self, name)
            if not _is_int(value):
                raise InvalidImage(f"{name} must be an integer, got {value!r}")
        if self.format not in SUPPORTED_FORMATS:
            raise InvalidImage(f"Unsupported format: {self.format!r}")
        if self.channels not in SUPPORTED_CHANNELS:
            raise InvalidImage(f"Channels must be one of {SUPPORTED_CHANNELS}, got {self.channels}")
        if self.width <= 0 or self.height <= 0:
            raise InvalidImage(f"Dimensions must be positive, got {self.width}x{self.height}")
        if self.max_value <= 0:
            raise InvalidImage(f"Max value must be positive, got {self.max_value}")
        if len(self.samples) != self.sample_count:
            raise InvalidImage(
                f"Expected {self.sample_count} samples for {self.width}x{self.height}, got {len(self.samples)}"
            )
        for index, value in enumerate(self.samples):
            if not _is_int(value):
                raise InvalidImage(f"Sample {index} must be an integer, got {value!r}")

    def in_range(self) -> bool:
        return all(0 <= value <= self.max_value for value in self.samples)

    def row(self, index: int) -> Tuple[int, ...]:
        if not 0 <= index < self.height:
            raise IndexError(f"Row {index} out of range for height {self.height}")
        start = index * self.row_length
        return self.samples[start : start + self.row_length]

    def rows(self) -> Iterator[Tuple[int, ...]]:
        for index in range(self.height):
            yield self.row(index)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[int]],
        max_value: int = DEFAULT_MAX_VALUE,
        channels: int = 1,
        format: str = "P3",
    ) -> "Image":
        """Build an image from a list of equally long rows."""
        if not rows or not rows[0]:
            raise InvalidImage("Rows must not be empty")
        row_length = len(rows[0])
        if any(len(row) != row_length for row in rows):
            raise InvalidImage("All rows must have the same length")
        if channels not in SUPPORTED_CHANNELS or isinstance(channels, bool):
            raise InvalidImage(f"Channels must be one of {SUPPORTED_CHANNELS}, got {channels!r}")
        if row_length % channels != 0:
            raise InvalidImage("Row length must be a multiple of channels")
        samples = tuple(value for row in rows for value in row)
        image = cls(format, max_value, row_length // channels, len(rows), samples, channels)
        image.validate()
        return image


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
