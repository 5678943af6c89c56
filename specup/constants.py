"""Fixed wavelength grid used when comparing spectra."""

WAVELENGTHS: tuple[float, ...] = tuple(float(wl) for wl in range(360, 831))
"""Wavelengths in nanometres, 360 to 830 inclusive, one nanometre apart."""