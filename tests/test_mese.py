import math

import pytest

from specup.mese import (
    bounded_mese_l,
    fourier_moments_of,
    mese_precomp,
    real_fourier_moments_of,
    to_phase,
)


def test_to_phase_endpoints():
    assert math.isclose(to_phase(380.0, 380.0, 780.0), -math.pi)
    assert math.isclose(to_phase(780.0, 380.0, 780.0), 0.0, abs_tol=1e-12)
    assert math.isclose(to_phase(580.0, 380.0, 780.0), -math.pi / 2)


def _uniform_phases(count):
    return [2 * math.pi * j / count for j in range(count)]


def test_moments_of_constant_signal():
    phases = _uniform_phases(64)
    values = [0.7] * 64
    moments = real_fourier_moments_of(phases, values, 4)
    assert len(moments) == 4
    assert math.isclose(moments[0], 0.7)
    for m in moments[1:]:
        assert math.isclose(m, 0.0, abs_tol=1e-12)


def test_real_moments_are_real_parts_of_complex_moments():
    phases = [to_phase(wl, 380.0, 780.0) for wl in range(380, 781, 10)]
    values = [math.sin(wl / 50.0) ** 2 for wl in range(380, 781, 10)]
    real = real_fourier_moments_of(phases, values, 5)
    cplx = fourier_moments_of(phases, values, 5)
    assert [c.real for c in cplx] == pytest.approx(real)
    assert cplx[0].imag == pytest.approx(0.0)


def test_moments_length_mismatch_raises():
    with pytest.raises(ValueError):
        fourier_moments_of([0.0, 1.0], [1.0], 2)


def test_bounded_mese_zero_multipliers_is_half():
    assert bounded_mese_l(-1.0, [0j, 0j, 0j]) == 0.5


@pytest.mark.parametrize("phase", [-math.pi, -2.0, -1.0, -0.1, 0.0])
def test_bounded_mese_stays_in_unit_interval(phase):
    value = bounded_mese_l(phase, [0.3 + 0j, 0.8 - 0.2j, -0.4 + 0.1j])
    assert 0.0 < value < 1.0


def test_mese_precomp_single_coefficient_is_constant():
    first = mese_precomp(-2.5, [1.0])
    second = mese_precomp(-0.3, [1.0])
    assert math.isclose(first, second)
    assert math.isclose(first, 2 * math.pi)


def test_mese_precomp_positive():
    for phase in (-3.0, -1.5, -0.2):
        assert mese_precomp(phase, [1.0, 0.3, -0.2]) > 0.0