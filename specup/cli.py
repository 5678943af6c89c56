"""Command-line option parsing for the spectral converter."""

from __future__ import annotations

import getopt
import re
import sys
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Optional, Sequence

from specup.image import Pixel
from specup.mathutil import Vec3

_SHORT_OPTIONS = "n:D:c:v:f:m:"
_LONG_OPTIONS = ["downsample", "ior"]

_HEX_RE = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ArgsError(ValueError):
    """The command line could not be accepted."""


class _Input(Enum):
    NONE = auto()
    COLOR = auto()
    FILE = auto()


@dataclass
class Args:
    """Settings gathered from the command line."""

    output_name: Optional[str] = None
    method: Optional[str] = None
    color: Optional[Pixel] = None
    output_dir: str = "output"
    input_path: str = ""
    downsample_mode: bool = False
    ior_mode: bool = False


def _parse_hex_color(text: str) -> Pixel:
    match = _HEX_RE.match(text)
    if match is None:
        raise ArgsError(f"Invalid color code: {text!r}")
    value = int(match.group(2), 16)
    if match.group(1) == "-":
        value = -value
    if not _INT_MIN <= value <= _INT_MAX:
        raise ArgsError(f"Color code out of range: {text!r}")
    return Pixel.from_rgb(value & 0xFFFFFFFF)


def _parse_color_vec(text: str) -> Pixel:
    parts = text.split(" ")
    if len(parts) < 3:
        raise ArgsError(f"Expected three components: {text!r}")
    try:
        r, g, b = (float(p) for p in parts[:3])
    except ValueError:
        raise ArgsError(f"Invalid color vector: {text!r}") from None
    return Pixel.from_vec3(Vec3(r, g, b))


def parse_args(argv: Optional[Sequence[str]] = None) -> Args:
    """Parse converter options; raises :class:`ArgsError` when they are not usable."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options, _ = getopt.gnu_getopt(list(argv), _SHORT_OPTIONS, _LONG_OPTIONS)
    except getopt.GetoptError:
        raise ArgsError("Unknown argument.") from None

    args = Args()
    input_type = _Input.NONE
    for opt, value in options:
        if opt == "--downsample":
            args.downsample_mode = True
        elif opt == "--ior":
            args.ior_mode = True
        elif opt in ("-c", "-v", "-f"):
            if input_type is not _Input.NONE:
                raise ArgsError("Only one input may be given.")
            if opt == "-c":
                args.color = _parse_hex_color(value)
                input_type = _Input.COLOR
            elif opt == "-v":
                args.color = _parse_color_vec(value)
                input_type = _Input.COLOR
            else:
                args.input_path = value
                input_type = _Input.FILE
        elif opt == "-m":
            args.method = value
        elif opt == "-D":
            args.output_dir = value
        elif opt == "-n":
            args.output_name = value

    if input_type is _Input.NONE:
        raise ArgsError("No input specified.")
    if args.output_name is None:
        args.output_name = Path(args.input_path).stem

    if args.ior_mode and input_type is not _Input.COLOR:
        raise ArgsError("IOR conversion is supported only for colors.")

    if args.downsample_mode:
        if input_type is not _Input.FILE or args.method is not None:
            raise ArgsError("Downsampling needs a file input and no method.")
        return args

    if args.method is None:
        raise ArgsError("No method specified.")
    return args