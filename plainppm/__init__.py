from .codec import (
    DecodeSettings,
    EncodeSettings,
    FormatError,
    Image,
    PPMError,
    ValidationError,
    decode,
    decode_bytes,
    decode_text,
    encode,
    encode_to,
    read_file,
    write_file,
)

__version__ = "0.1.0"

__all__ = [
    "DecodeSettings",
    "decode",
    "decode_bytes",
    "decode_text",
    "encode",
    "encode_to",
    "EncodeSettings",
    "FormatError",
    "Image",
    "PPMError",
    "read_file",
    "ValidationError",
    "write_file",
]
