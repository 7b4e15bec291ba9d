"""Spectrum views derived from complex Fourier coefficients.

All functions are pure and total: they accept any 1D complex array (including an
empty one) and return a float array of the same length.
"""

from __future__ import annotations

import numpy as np


def amplitude(coeff: np.ndarray) -> np.ndarray:
    """Magnitude ``|z| = sqrt(re^2 + im^2)`` of each coefficient."""
    c = np.asarray(coeff, dtype=np.complex128)
    return np.hypot(c.real, c.imag)


def power_spectrum(coeff: np.ndarray) -> np.ndarray:
    """Squared magnitude, computed by squaring :func:`amplitude`.

    The squares are taken of the very same amplitude values, so
    ``power_spectrum(c)[k] == amplitude(c)[k] ** 2`` holds bit for bit.
    """
    amp = amplitude(coeff)
    return amp * amp


def phase(coeff: np.ndarray) -> np.ndarray:
    """Principal argument ``atan2(im, re)`` of each coefficient, in ``(-pi, pi]``.

    A negative real coefficient whose imaginary part is -0 or rounding noise
    would give ``-pi``; it is folded to ``+pi``.
    """
    c = np.asarray(coeff, dtype=np.complex128)
    ph = np.arctan2(c.imag, c.real)
    return np.where(ph <= -np.pi, np.pi, ph)


def frequency_bins(N: int, sample_rate: float = 1.0) -> np.ndarray:
    """Frequency of bin ``k`` for a length-``N`` transform: ``k * sample_rate / N``.

    Bins run ``0..N-1`` (no fftshift); bins above ``N/2`` alias negative frequencies.
    """
    N = int(N)
    if N < 0:
        raise ValueError(f"N must be >= 0, got {N}")
    if N == 0:
        return np.zeros(0, dtype=float)
    return np.arange(N, dtype=float) * float(sample_rate) / float(N)
