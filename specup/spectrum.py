"""Spectra, spectral images and the sampled spectrum they are built from."""

from __future__ import annotations

import bisect
from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, Iterator, Mapping, Optional, TypeVar


class Spectrum(ABC):
    """A spectral distribution that can be evaluated at any wavelength."""

    @abstractmethod
    def get_or_interpolate(self, w: float) -> float:
        """Value of the spectrum at wavelength ``w``."""

    def __call__(self, w: float) -> float:
        return self.get_or_interpolate(w)

    @staticmethod
    def none() -> BasicSpectrum:
        """An empty spectrum, zero everywhere."""
        return BasicSpectrum()


S = TypeVar("S", bound=Spectrum)


class SpectralImage(Generic[S]):
    """A grid of spectra stored row by row."""

    def __init__(self, width: int, height: int, factory: Callable[[], S]) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self.width = width
        self.height = height
        self._data: list[S] = [factory() for _ in range(width * height)]

    def _index(self, i: int, j: int) -> int:
        pos = i + j * self.width
        if pos < 0 or pos >= self.width * self.height:
            raise IndexError("Requested pixel is out of range")
        return pos

    def at(self, i: int, j: int) -> S:
        """Spectrum at column ``i``, row ``j``."""
        return self._data[self._index(i, j)]

    def set(self, i: int, j: int, spectrum: S) -> None:
        """Replace the spectrum at column ``i``, row ``j``."""
        self._data[self._index(i, j)] = spectrum

    def __iter__(self) -> Iterator[S]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)


class BasicSpectrum(Spectrum):
    """A spectrum given by values at discrete wavelengths, linear in between."""

    def __init__(self, values: Optional[Mapping[float, float]] = None) -> None:
        self._values: dict[float, float] = {}
        self._sorted: Optional[list[float]] = None
        if values:
            for wavelength, value in values.items():
                self.set(wavelength, value)

    def set(self, wavelength: float, value: float) -> None:
        """Store ``value`` at ``wavelength``."""
        wavelength = float(wavelength)
        if wavelength not in self._values:
            self._sorted = None
        self._values[wavelength] = float(value)

    def __setitem__(self, wavelength: float, value: float) -> None:
        self.set(wavelength, value)

    def wavelengths(self) -> list[float]:
        """Sampled wavelengths in ascending order."""
        if self._sorted is None:
            self._sorted = sorted(self._values)
        return list(self._sorted)

    def __getitem__(self, w: float) -> float:
        """Stored value at ``w``; raises ``KeyError`` if it was never set."""
        return self._values[float(w)]

    def get(self, w: float, default: float = 0.0) -> float:
        """Stored value at ``w`` or ``default``."""
        return self._values.get(float(w), default)

    def __contains__(self, w: object) -> bool:
        return isinstance(w, (int, float)) and float(w) in self._values

    def __len__(self) -> int:
        return len(self._values)

    def items(self) -> Iterable[tuple[float, float]]:
        """Wavelength and value pairs in ascending wavelength order."""
        return [(w, self._values[w]) for w in self.wavelengths()]

    def copy(self) -> BasicSpectrum:
        return BasicSpectrum(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BasicSpectrum):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"BasicSpectrum({dict(self.items())!r})"

    def get_or_interpolate(self, w: float) -> float:
        """Linear interpolation between samples; zero outside the sampled range."""
        if self._sorted is None:
            self._sorted = sorted(self._values)
        keys = self._sorted
        idx = bisect.bisect_left(keys, w)
        if idx == len(keys):
            return 0.0
        b = keys[idx]
        f_b = self._values[b]
        if b == w:
            return f_b
        if idx == 0:
            return 0.0
        a = keys[idx - 1]
        f_a = self._values[a]
        return f_a + (f_b - f_a) * (w - a) / (b - a)


class BasicSpectralImage(SpectralImage[BasicSpectrum]):
    """An image of sampled spectra with the set of wavelengths it declares."""

    def __init__(self, width: int, height: int, fill: Optional[BasicSpectrum] = None) -> None:
        if fill is None:
            super().__init__(width, height, BasicSpectrum)
            self._wavelengths: set[float] = set()
        else:
            super().__init__(width, height, fill.copy)
            self._wavelengths = set(fill.wavelengths())

    @property
    def wavelengths(self) -> list[float]:
        """Declared wavelengths in ascending order."""
        return sorted(self._wavelengths)

    @wavelengths.setter
    def wavelengths(self, values: Iterable[float]) -> None:
        self._wavelengths = {float(v) for v in values}

    def add_wavelength(self, w: float) -> None:
        """Declare wavelength ``w``."""
        self._wavelengths.add(float(w))

    def remove_wavelength(self, w: float) -> None:
        """Drop wavelength ``w`` from the declared set, if present."""
        self._wavelengths.discard(float(w))

    def validate(self) -> bool:
        """True if every pixel's wavelengths are among the declared ones."""
        used: set[float] = set()
        for spectrum in self:
            used.update(spectrum.wavelengths())
        return used <= self._wavelengths