"""Tests for the reference DFT and the normalization step."""

from __future__ import annotations

import numpy as np
import pytest

from fourier_engine.analysis.direct import (
    NORMALIZATIONS,
    apply_normalization,
    direct_transform,
    rotation_matrix,
)
from fourier_engine.analysis.rotors import build_rotors


def test_rotation_matrix_shape_and_first_row_column() -> None:
    N = 6
    W = rotation_matrix(N)
    assert W.shape == (N, N)
    np.testing.assert_array_equal(W[0, :], np.ones(N, dtype=complex))
    np.testing.assert_array_equal(W[:, 0], np.ones(N, dtype=complex))


def test_rotation_matrix_row_one_equals_rotor_table() -> None:
    """Row k=1 of the full matrix holds the base rotors, built independently."""
    N = 10
    np.testing.assert_allclose(rotation_matrix(N)[1, :], build_rotors(N), atol=1e-15)


def test_rotation_matrix_symmetric() -> None:
    W = rotation_matrix(9)
    np.testing.assert_array_equal(W, W.T)


@pytest.mark.parametrize("N", [1, 2, 5, 8, 17, 64])
def test_direct_is_conjugate_of_numpy_fft(N: int) -> None:
    rng = np.random.default_rng(N)
    x = rng.standard_normal(N)
    np.testing.assert_allclose(direct_transform(x), np.conj(np.fft.fft(x)), atol=1e-10 * N, rtol=0.0)


def test_direct_zero_input() -> None:
    X = direct_transform(np.zeros(12))
    assert np.all(X == 0)


def test_direct_impulse_is_flat_with_unit_magnitude() -> None:
    N = 16
    x = np.zeros(N)
    x[0] = 1.0
    X = direct_transform(x)
    np.testing.assert_allclose(np.abs(X), 1.0, atol=1e-15)


def test_direct_rejects_bad_buffer() -> None:
    with pytest.raises(ValueError):
        direct_transform(np.zeros((2, 2)))
    with pytest.raises(ValueError):
        direct_transform(np.zeros(0))


# -----------------------------------------------------------------------
# Normalization
# -----------------------------------------------------------------------


def test_normalization_modes() -> None:
    raw = np.array([2.0 + 4.0j, -1.0, 0.5j, 8.0])
    N = raw.size
    np.testing.assert_array_equal(apply_normalization(raw, "none"), raw)
    np.testing.assert_array_equal(apply_normalization(raw, "legacy"), raw * N)
    np.testing.assert_array_equal(apply_normalization(raw, "forward"), raw / N)


def test_normalization_returns_new_array() -> None:
    raw = np.array([1.0 + 1.0j, 2.0])
    out = apply_normalization(raw, "legacy")
    assert out is not raw
    np.testing.assert_array_equal(raw, [1.0 + 1.0j, 2.0])


def test_normalization_case_insensitive() -> None:
    raw = np.ones(4, dtype=complex)
    np.testing.assert_array_equal(apply_normalization(raw, " Forward "), raw / 4)


def test_unknown_normalization() -> None:
    with pytest.raises(ValueError, match="Unknown normalization"):
        apply_normalization(np.ones(2), "ortho")


def test_normalizations_listed() -> None:
    assert NORMALIZATIONS == ("none", "legacy", "forward")


def test_direct_uses_cos_plus_i_sin_rotation() -> None:
    """A delayed impulse rotates counter-clockwise: X[k] = exp(+i 2 pi k / N)."""
    X = direct_transform(np.array([0.0, 1.0, 0.0, 0.0]))
    np.testing.assert_allclose(X, [1.0, 1j, -1.0, -1j], atol=1e-15)


def test_rotation_matrix_positive_sine() -> None:
    W = rotation_matrix(8)
    assert W[1, 2] == pytest.approx(1j)
    assert W[1, 6] == pytest.approx(-1j)
