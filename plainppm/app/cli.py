from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

from ..codec import (
    DEFAULT_MAX_VALUE,
    DecodeSettings,
    EncodeSettings,
    Image,
    read_file,
    write_file,
)
from ..generate import random_image
from ..rendering import load_raster, save_raster

PPM_EXTENSIONS = {".ppm", ".pnm"}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="plainppm",
        description="Read, write and convert plain-text (P3) PPM images.",
    )
    parser.add_argument(
        "--channels",
        type=int,
        choices=(1, 3),
        default=1,
        help="Samples per pixel: 1 (flat, default) or 3 (RGB)",
    )
    parser.add_argument("--check-range", action="store_true", help="Reject samples outside [0, max value] when reading or writing")
    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("show", help="Print the header and samples row by row")
    show.add_argument("path", help="PPM file to read")

    info = commands.add_parser("info", help="Print the header fields")
    info.add_argument("path", help="PPM file to read")

    generate = commands.add_parser("generate", help="Write a random image")
    generate.add_argument("path", help="Output PPM file")
    generate.add_argument("--width", type=int, required=True)
    generate.add_argument("--height", type=int, required=True)
    generate.add_argument("--max-value", type=int, default=DEFAULT_MAX_VALUE)
    generate.add_argument("--seed", type=int, help="Random seed for reproducible output")

    convert = commands.add_parser("convert", help="Convert between PPM and any Pillow format")
    convert.add_argument("source")
    convert.add_argument("target")
    return parser.parse_args(argv)


def format_header(image: Image) -> str:
    return (
        f"format: {image.format}\n"
        f"width: {image.width}\n"
        f"height: {image.height}\n"
        f"max value: {image.max_value}\n"
        f"channels: {image.channels}\n"
        f"samples: {len(image.samples)}"
    )


def format_rows(image: Image) -> str:
    return "\n".join(" ".join(str(value) for value in row) for row in image.rows())


def _decode_settings(args: argparse.Namespace) -> DecodeSettings:
    return DecodeSettings(channels=args.channels, check_range=args.check_range)


def _encode_settings(args: argparse.Namespace) -> EncodeSettings:
    return EncodeSettings(check_range=args.check_range)


def _is_ppm(path: str) -> bool:
    return os.path.splitext(path)[1].lower() in PPM_EXTENSIONS


def show(args: argparse.Namespace) -> int:
    image = read_file(args.path, _decode_settings(args))
    print(format_header(image))
    print(format_rows(image))
    return 0


def info(args: argparse.Namespace) -> int:
    image = read_file(args.path, _decode_settings(args))
    print(format_header(image))
    return 0


def generate(args: argparse.Namespace) -> int:
    image = random_image(args.width, args.height, args.max_value, args.channels, args.seed)
    write_file(args.path, image, _encode_settings(args))
    return 0


def convert(args: argparse.Namespace) -> int:
    if _is_ppm(args.source):
        image = read_file(args.source, _decode_settings(args))
    else:
        image = load_raster(args.source, args.channels)
    if _is_ppm(args.target):
        write_file(args.target, image, _encode_settings(args))
    else:
        save_raster(image, args.target)
    return 0


COMMANDS = {
    "show": show,
    "info": info,
    "generate": generate,
    "convert": convert,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        return COMMANDS[args.command](args)
    except (ValueError, OSError) as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
