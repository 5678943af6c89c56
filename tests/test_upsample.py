import pytest

from specup.image import Image, Pixel
from specup.mathutil import Vec3
from specup.upsample import SMITS_WAVELENGTHS, SmitsUpsampler, Upsampler, smits


def test_wavelength_grid_is_fixed():
    wavelengths = smits((0.5, 0.5, 0.5)).wavelengths()
    assert wavelengths[0] == 397.0
    assert wavelengths[-1] == 703.0
    assert len(wavelengths) == 10
    assert list(SMITS_WAVELENGTHS) == wavelengths


def test_smits_spectrum_has_smits_wavelengths():
    spectrum = smits(Vec3(0.2, 0.7, 0.4))
    assert spectrum.wavelengths() == list(SMITS_WAVELENGTHS)


def test_smits_white_is_white_basis():
    spectrum = smits(Vec3(1.0, 1.0, 1.0))
    assert spectrum[397] == pytest.approx(1.0)
    assert spectrum[465] == pytest.approx(0.9999)
    assert spectrum[533] == pytest.approx(0.9992)


def test_smits_black_is_zero():
    spectrum = smits((0.0, 0.0, 0.0))
    assert all(value == 0.0 for _, value in spectrum.items())


def test_smits_pure_red_is_red_basis():
    spectrum = smits((1.0, 0.0, 0.0))
    assert spectrum[601] == pytest.approx(0.8325)
    assert spectrum[703] == pytest.approx(1.0149)
    assert spectrum[465] == pytest.approx(0.0)


def test_smits_grey_scales_linearly():
    full = smits((1.0, 1.0, 1.0))
    half = smits((0.5, 0.5, 0.5))
    for wl in SMITS_WAVELENGTHS:
        assert half[wl] == pytest.approx(0.5 * full[wl])


@pytest.mark.parametrize(
    "rgb",
    [(0.1, 0.5, 0.9), (0.1, 0.9, 0.5), (0.5, 0.1, 0.9), (0.9, 0.1, 0.5), (0.5, 0.9, 0.1), (0.9, 0.5, 0.1)],
)
def test_smits_all_branches_nonnegative_for_valid_colours(rgb):
    spectrum = smits(rgb)
    assert len(spectrum) == len(SMITS_WAVELENGTHS)
    assert all(value >= -1e-12 for _, value in spectrum.items())


def test_upsampler_is_abstract():
    with pytest.raises(TypeError):
        Upsampler()


def test_upsample_pixel_matches_functional():
    pixel = Pixel(255, 255, 255)
    spectrum = SmitsUpsampler().upsample_pixel(pixel)
    assert spectrum == smits(pixel.to_vec3())
    assert spectrum[397] == pytest.approx(1.0)


def test_upsample_image(capsys):
    image = Image(2, 2)
    image.set(0, 0, Pixel(255, 0, 0))
    image.set(1, 0, Pixel(0, 255, 0))
    image.set(0, 1, Pixel(0, 0, 255))
    image.set(1, 1, Pixel(10, 20, 30))
    result = SmitsUpsampler().upsample(image)
    capsys.readouterr()
    assert (result.width, result.height) == (2, 2)
    assert result.wavelengths == list(SMITS_WAVELENGTHS)
    assert result.validate()
    for j in range(2):
        for i in range(2):
            assert result.at(i, j) == smits(image.at(i, j).to_vec3())


def test_upsample_empty_image():
    result = SmitsUpsampler().upsample(Image(0, 0))
    assert len(result) == 0
    assert result.wavelengths == list(SMITS_WAVELENGTHS)