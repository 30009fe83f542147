from .decoder import DecodeSettings, PPMDecoder, decode, decode_bytes, decode_text
from .encoder import EncodeSettings, PPMEncoder, encode, encode_to, wrap_samples
from .errors import (
    BadDimensions,
    BadMagic,
    BadMaxValue,
    BadSample,
    FormatError,
    InvalidImage,
    PPMError,
    SampleOutOfRange,
    TruncatedPayload,
    ValidationError,
)
from .files import read_file, write_file
from .tokens import Token, scan
from .types import DEFAULT_MAX_VALUE, MAX_LINE_LENGTH, SUPPORTED_FORMATS, Image

__all__ = [
    "BadDimensions",
    "BadMagic",
    "BadMaxValue",
    "BadSample",
    "DecodeSettings",
    "DEFAULT_MAX_VALUE",
    "decode",
    "decode_bytes",
    "decode_text",
    "encode",
    "encode_to",
    "EncodeSettings",
    "FormatError",
    "Image",
    "InvalidImage",
    "MAX_LINE_LENGTH",
    "PPMDecoder",
    "PPMEncoder",
    "PPMError",
    "read_file",
    "SampleOutOfRange",
    "scan",
    "SUPPORTED_FORMATS",
    "Token",
    "TruncatedPayload",
    "ValidationError",
    "wrap_samples",
    "write_file",
]
