"""RGB to spectrum upsampling, with the Smits method."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence, Union

from specup.image import Image, Pixel
from specup.mathutil import Vec3
from specup.progress import ProgressBar
from specup.spectrum import BasicSpectralImage, BasicSpectrum, SpectralImage, Spectrum

SMITS_WAVELENGTHS: tuple[float, ...] = (
    397.0, 431.0, 465.0, 499.0, 533.0,
    567.0, 601.0, 635.0, 669.0, 703.0,
)
"""Wavelengths, in nanometres, at which the Smits basis spectra are sampled."""

_WHITE = (1.0000, 1.0000, 0.9999, 0.9993, 0.9992, 0.9998, 1.0000, 1.0000, 1.0000, 1.0000)
_CYAN = (0.9710, 0.9426, 1.0007, 1.0007, 1.0007, 1.0007, 0.1564, 0.0000, 0.0000, 0.0000)
_MAGENTA = (1.0000, 1.0000, 0.9685, 0.2229, 0.0000, 0.0458, 0.8369, 1.0000, 1.0000, 0.9959)
_YELLOW = (0.0001, 0.0000, 0.1088, 0.6651, 1.0000, 1.0000, 0.9996, 0.9586, 0.9685, 0.9840)
_RED = (0.1012, 0.0515, 0.0000, 0.0000, 0.0000, 0.0000, 0.8325, 1.0149, 1.0149, 1.0149)
_GREEN = (0.0000, 0.0000, 0.0273, 0.7937, 1.0000, 0.9418, 0.1719, 0.0000, 0.0000, 0.0025)
_BLUE = (1.0000, 1.0000, 0.8916, 0.3323, 0.0000, 0.0000, 0.0003, 0.0369, 0.0483, 0.0496)

_PROGRESS_STEP = 1000


def _terms(r: float, g: float, b: float) -> list[tuple[float, tuple[float, ...]]]:
    if r <= g and r <= b:
        if g <= b:
            return [(r, _WHITE), (g - r, _CYAN), (b - g, _BLUE)]
        return [(r, _WHITE), (b - r, _CYAN), (g - b, _GREEN)]
    if g <= r and g <= b:
        if r <= b:
            return [(g, _WHITE), (r - g, _MAGENTA), (b - r, _BLUE)]
        return [(g, _WHITE), (b - g, _MAGENTA), (r - b, _RED)]
    if r <= g:
        return [(b, _WHITE), (r - b, _YELLOW), (g - r, _GREEN)]
    return [(b, _WHITE), (g - b, _YELLOW), (r - g, _RED)]


def smits(rgb: Union[Vec3, Sequence[float]]) -> BasicSpectrum:
    """Reflectance spectrum for a linear RGB colour built from Smits' basis spectra."""
    r, g, b = (float(c) for c in rgb)
    values = [0.0] * len(SMITS_WAVELENGTHS)
    for mul, basis in _terms(r, g, b):
        values = [acc + mul * v for acc, v in zip(values, basis)]
    return BasicSpectrum(dict(zip(SMITS_WAVELENGTHS, values)))


class Upsampler(ABC):
    """Turns RGB pixels and images into spectra."""

    @abstractmethod
    def upsample(self, image: Image) -> SpectralImage:
        """Spectral image with one spectrum per pixel of ``image``."""

    @abstractmethod
    def upsample_pixel(self, pixel: Pixel) -> Spectrum:
        """Spectrum for a single pixel."""


class SmitsUpsampler(Upsampler):
    """Upsampler using :func:`smits`."""

    def upsample_pixel(self, pixel: Pixel) -> BasicSpectrum:
        return smits(pixel.to_vec3())

    def upsample(self, image: Image) -> BasicSpectralImage:
        dest = BasicSpectralImage(image.width, image.height)
        for wl in SMITS_WAVELENGTHS:
            dest.add_wavelength(wl)

        total = len(image)
        bar = ProgressBar(total, _PROGRESS_STEP) if total else None
        for index, pixel in enumerate(image):
            j, i = divmod(index, image.width)
            dest.set(i, j, smits(pixel.to_vec3()))
            if bar is not None:
                bar.update(index + 1)
        if bar is not None:
            bar.finish()
        return dest