from __future__ import annotations

from typing import Optional


class PPMError(ValueError):
    """Base class for every codec failure."""

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class FormatError(PPMError):
    """Malformed PPM input."""


class BadMagic(FormatError):
    pass


class BadDimensions(FormatError):
    pass


class BadMaxValue(FormatError):
    pass


class BadSample(FormatError):
    pass


class SampleOutOfRange(FormatError):
    pass


class TruncatedPayload(FormatError):
    def __init__(self, expected: int, found: int, line: Optional[int] = None) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"expected {expected} samples, found {found}", line)


class ValidationError(PPMError):
    """Image rejected by the encoder."""


class InvalidImage(ValidationError):
    pass
