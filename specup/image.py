"""Eight-bit RGB pixels and images backed by Pillow for file input and output."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Union

from PIL import Image as _pil_image
from PIL import UnidentifiedImageError

from specup.mathutil import Vec3


@dataclass(frozen=True)
class Pixel:
    """An RGB pixel with components in ``0..255``."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for value in (self.r, self.g, self.b):
            if not 0 <= value <= 255:
                raise ValueError(f"pixel component out of range: {value}")

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b

    def __getitem__(self, index: int) -> int:
        return (self.r, self.g, self.b)[index]

    @staticmethod
    def from_rgb(rgb: int) -> Pixel:
        """Build a pixel from a ``0xRRGGBB`` integer."""
        return Pixel((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)

    @staticmethod
    def from_vec3(v: Vec3) -> Pixel:
        """Quantise a colour with components in ``[0, 1]``."""
        return Pixel(*(max(0, min(255, int(c * 255.999))) for c in v))

    def as_rgb(self) -> int:
        """The pixel as a ``0xRRGGBB`` integer."""
        return (self.r << 16) | (self.g << 8) | self.b

    def to_vec3(self) -> Vec3:
        """Components scaled to ``[0, 1]``."""
        return Vec3(self.r / 255.0, self.g / 255.0, self.b / 255.0)


class Image:
    """A rectangular grid of RGB pixels, stored row by row."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self.width = width
        self.height = height
        self._pixels: list[Pixel] = [Pixel()] * (width * height)

    @classmethod
    def load(cls, path: Union[str, Path]) -> Image:
        """Read an image file as 8-bit RGB."""
        try:
            with _pil_image.open(path) as src:
                rgb = src.convert("RGB")
        except (OSError, UnidentifiedImageError) as exc:
            raise OSError(f"Error reading image at {path}") from exc
        image = cls(rgb.width, rgb.height)
        image._pixels = [Pixel(*px) for px in rgb.getdata()]
        return image

    def _index(self, i: int, j: int) -> int:
        if not (0 <= i < self.width and 0 <= j < self.height):
            raise IndexError("Requested pixel is out of range")
        return i + j * self.width

    def at(self, i: int, j: int) -> Pixel:
        """Pixel at column ``i``, row ``j``."""
        return self._pixels[self._index(i, j)]

    def set(self, i: int, j: int, pixel: Pixel) -> None:
        """Replace the pixel at column ``i``, row ``j``."""
        self._pixels[self._index(i, j)] = pixel

    def __iter__(self) -> Iterator[Pixel]:
        return iter(self._pixels)

    def __len__(self) -> int:
        return len(self._pixels)

    def save(self, path: Union[str, Path], fmt: str = "") -> bool:
        """Write as ``png`` or ``jpg``; the format defaults to the file extension."""
        if not fmt:
            fmt = Path(path).suffix[1:]
        if fmt == "png":
            options = {"format": "PNG"}
        elif fmt == "jpg":
            options = {"format": "JPEG", "quality": 90}
        else:
            return False
        out = _pil_image.new("RGB", (self.width, self.height))
        out.putdata([tuple(p) for p in self._pixels])
        try:
            out.save(path, **options)
        except (OSError, ValueError):
            return False
        return True