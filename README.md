# specup

`specup` turns RGB colours and images into spectra. Alongside that it
provides the pieces spectral work needs: sampled spectra with linear
interpolation, spectral images, small vector and matrix types, maximum
entropy spectral estimates from Fourier moments, an ENVI header reader,
parsing of converter options, and a terminal progress bar.

The only runtime dependency is Pillow, used to read and write PNG and JPEG
images.

## Upsampling a colour

Smits' method (`specup.upsample.smits`) builds a ten-sample reflectance
spectrum, sampled at `SMITS_WAVELENGTHS` (397 to 703 nm), from an RGB triple
with components in `[0, 1]`:

```python
from specup.mathutil import Vec3
from specup.upsample import smits

spectrum = smits(Vec3(0.8, 0.4, 0.1))

for wavelength in spectrum.wavelengths():
    print(wavelength, spectrum[wavelength])

# Between samples the spectrum is interpolated linearly;
# outside the sampled range it is zero.
print(spectrum(550.0))
```

## Upsampling an image

`SmitsUpsampler` implements the `Upsampler` interface: `upsample(image)`
returns a `BasicSpectralImage` of the same size, drawing a progress bar on
standard output while it works, and `upsample_pixel(pixel)` returns one
`BasicSpectrum`.

```python
from specup.image import Image, Pixel
from specup.upsample import SmitsUpsampler

upsampler = SmitsUpsampler()

image = Image.load("texture.png")
spectral = upsampler.upsample(image)
print(spectral.at(0, 0)(500.0))

spectrum = upsampler.upsample_pixel(Pixel.from_rgb(0xFF8000))
print(spectrum(620.0))
```

## Spectra and spectral images

`Spectrum` is the abstract base: anything with `get_or_interpolate(w)` that
can also be called as `spectrum(w)`. `BasicSpectrum` holds wavelength/value
pairs; `[]` requires a wavelength that was set (otherwise `KeyError`), while
calling the spectrum interpolates.

```python
from specup.spectrum import BasicSpectrum

s = BasicSpectrum()
s.set(400.0, 0.2)
s.set(500.0, 0.6)
print(s(450.0))   # 0.4
print(s[500.0])   # 0.6
```

`SpectralImage` is a width × height grid of spectra with `at(i, j)` and
`set(i, j, spectrum)`; out-of-range positions raise `IndexError`.
`BasicSpectralImage` also keeps a set of declared wavelengths
(`add_wavelength`, `remove_wavelength`, the `wavelengths` property), and
`validate()` reports whether every pixel uses only declared wavelengths.

`specup.constants.WAVELENGTHS` is the 360–830 nm grid in 1 nm steps.

## Pixels and images

`Pixel.from_rgb(0xRRGGBB)` and `Pixel.from_vec3(v)` build 8-bit pixels;
`as_rgb()` and `to_vec3()` convert back. `Image(width, height)` is a grid of
pixels; `Image.load(path)` reads a file as RGB (raising `OSError` if it
cannot), `at` and `set` access pixels, and `save(path, fmt)` writes PNG or
JPEG, taking the format from the extension when `fmt` is empty and returning
`False` for any other format or a failed write.

## Vectors, matrices and helpers

`specup.mathutil` has the immutable `Vec3` (arithmetic with vectors and
scalars, `max()`, `sum()`, `Vec3.distance`, `Vec3.distance2`) and `Mat3`
(row-major; `m @ v` and `v @ m` multiply with a vector), together with
`clamp`, `clamp_vec`, `sigmoid_polynomial`, `smoothstep`, `inv_smoothstep`,
`determinant` and `inverse`.

`specup.mese` has `to_phase`, `fourier_moments_of`,
`real_fourier_moments_of`, `bounded_mese_l` (evaluation from Lagrange
multipliers) and `mese_precomp` (evaluation from precomputed coefficients).

## ENVI headers

```python
from specup.envi import MetaENVI

meta = MetaENVI.load("scene.hdr")
print(meta.samples, meta.lines, meta.bands, meta.interleave)
```

`MetaENVI.parse(text)` does the same for header text in memory, and
`parse_header_entries(text)` returns the raw `name = value` entries.
A missing `ENVI` first line, `wavelength` or `Illuminant` field, an unknown
interleave, an unsupported data type or malformed braces raise `ValueError`.
Entries that are not recognised are kept in `meta.additional`.

## Converter options

`specup.cli.parse_args(argv)` reads converter options into an `Args` record
and raises `ArgsError` when they are unusable:

| Option            | Meaning                                          |
|-------------------|--------------------------------------------------|
| `-c RRGGBB`       | input colour as a hexadecimal code               |
| `-v "R G B"`      | input colour as three floats                     |
| `-f PATH`         | input file                                       |
| `-m METHOD`       | upsampling method                                |
| `-D DIR`          | output directory (default `output`)              |
| `-n NAME`         | output name (default: the input file's stem)     |
| `--downsample`    | downsampling mode                                |
| `--ior`           | index-of-refraction mode                         |

Exactly one input (`-c`, `-v` or `-f`) must be given. Without
`--downsample` a method is required; with it the input must be a file and no
method may be given; `--ior` is accepted only with a colour.

## Progress reporting

```python
import sys
from specup.progress import ProgressBar

bar = ProgressBar(10_000, 1000, sys.stdout)
for i in range(10_000):
    bar.update(i + 1, False)
bar.finish()
```

`ProgressBar` is also a context manager that calls `finish()` on a clean exit.

## What the package does not do

- There is no command to run: `parse_args` only checks options, and nothing
  acts on the resulting `Args`.
- Spectra cannot be converted back to XYZ or RGB, and spectra or spectral
  images cannot be saved to or loaded from files.
- `MetaENVI` reads headers only; the raw ENVI band data is not read.
- Smits is the only upsampling method.