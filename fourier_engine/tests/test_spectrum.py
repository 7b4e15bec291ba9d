"""Tests for amplitude, power and phase views."""

from __future__ import annotations

import math

import numpy as np
import pandas as pd
import pytest

from fourier_engine.analysis.engine import FourierEngine
from fourier_engine.analysis.spectrum import amplitude, frequency_bins, phase, power_spectrum
from fourier_engine.models.results import SpectrumResult


def test_amplitude_values() -> None:
    c = np.array([3.0 + 4.0j, -5.0, 0.0, -1.0j])
    np.testing.assert_allclose(amplitude(c), [5.0, 5.0, 0.0, 1.0])


def test_power_is_exact_square_of_amplitude() -> None:
    rng = np.random.default_rng(7)
    c = rng.standard_normal(257) + 1j * rng.standard_normal(257)
    amp = amplitude(c)
    pw = power_spectrum(c)
    for k in range(c.size):
        assert pw[k] == amp[k] ** 2


def test_engine_power_is_exact_square_of_amplitude() -> None:
    eng = FourierEngine(50, "bluestein")
    assert eng.run_fast(np.random.default_rng(3).standard_normal(50))
    amp = eng.amplitude()
    pw = eng.power_spectrum()
    assert np.array_equal(pw, amp ** 2)


@pytest.mark.parametrize(
    "z, expected",
    [
        (1.0 + 1.0j, math.pi / 4),
        (-1.0 + 1.0j, 3 * math.pi / 4),
        (-1.0 - 1.0j, -3 * math.pi / 4),
        (1.0 - 1.0j, -math.pi / 4),
        (-1.0 + 0.0j, math.pi),
        (0.0 + 2.0j, math.pi / 2),
        (0.0 - 2.0j, -math.pi / 2),
        (0.0 + 0.0j, 0.0),
    ],
)
def test_phase_quadrants(z: complex, expected: float) -> None:
    assert phase(np.array([z]))[0] == pytest.approx(expected)


def test_engine_phase_matches_atan2() -> None:
    eng = FourierEngine(16)
    assert eng.run_fast(np.random.default_rng(11).standard_normal(16))
    c = eng.coefficients()
    ph = eng.phase()
    for k in range(c.size):
        expected = math.atan2(c[k].imag, c[k].real)
        if expected <= -math.pi:
            expected = math.pi
        assert ph[k] == pytest.approx(expected, rel=1e-15, abs=1e-15)
    assert np.all(ph <= math.pi) and np.all(ph > -math.pi)


def test_empty_inputs() -> None:
    empty = np.zeros(0, dtype=complex)
    assert amplitude(empty).shape == (0,)
    assert power_spectrum(empty).shape == (0,)
    assert phase(empty).shape == (0,)


def test_frequency_bins() -> None:
    np.testing.assert_allclose(frequency_bins(4, sample_rate=8.0), [0.0, 2.0, 4.0, 6.0])
    assert frequency_bins(0).shape == (0,)
    with pytest.raises(ValueError):
        frequency_bins(-1)


def test_result_to_frame() -> None:
    eng = FourierEngine(4)
    assert eng.run_fast([1.0, 0.0, -1.0, 0.0])
    df = eng.spectrum().to_frame(sample_rate=4.0)
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ["bin", "frequency", "re", "im", "amplitude", "power", "phase"]
    assert len(df) == 4
    np.testing.assert_allclose(df["frequency"], [0.0, 1.0, 2.0, 3.0])
    np.testing.assert_allclose(df["amplitude"], [0.0, 2.0, 0.0, 2.0], atol=1e-12)


def test_result_to_frame_without_rate() -> None:
    res = SpectrumResult(
        size=2,
        strategy="numpy",
        normalization="none",
        coefficients=np.array([1.0 + 0j, -1.0 + 0j]),
        amplitude=np.array([1.0, 1.0]),
        power=np.array([1.0, 1.0]),
        phase=np.array([0.0, math.pi]),
    )
    df = res.to_frame()
    assert "frequency" not in df.columns
    assert df["bin"].tolist() == [0, 1]


def test_phase_negative_zero_imaginary_maps_to_plus_pi() -> None:
    c = np.array([complex(-2.0, -0.0)])
    assert phase(c)[0] == pytest.approx(math.pi)


def test_phase_rounding_noise_on_negative_real_maps_to_plus_pi() -> None:
    c = np.array([complex(-4.0, -4.9e-16), complex(-1.0, 0.0)])
    ph = phase(c)
    assert ph[0] == pytest.approx(math.pi)
    assert np.all(ph > -math.pi)


def test_phase_scalar_input() -> None:
    assert float(phase(complex(-3.0, -0.0))) == pytest.approx(math.pi)


def test_result_to_frame_frequency_matches_frequency_bins() -> None:
    eng = FourierEngine(6, "numpy")
    assert eng.run_fast(np.arange(6.0))
    df = eng.spectrum().to_frame(sample_rate=48.0)
    np.testing.assert_array_equal(df["frequency"].to_numpy(), frequency_bins(6, sample_rate=48.0))
