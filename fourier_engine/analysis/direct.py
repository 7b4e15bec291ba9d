"""Reference (brute-force) discrete Fourier transform.

This is the O(N^2) textbook definition

.. code-block:: text

    X[k] = sum_n  exp(+i 2 pi k n / N) * x[n]

evaluated with an explicit ``N x N`` rotation matrix.  It is very slow for large
``N`` and exists to cross-check the fast strategies; do not use it for
production-size inputs.

The rotation is ``cos + i sin`` (the same sign as the rotor table), so for real
input the coefficients are the complex conjugates of ``numpy.fft.fft``.

Normalization
-------------
Transforms in this package return the raw sum above.  Scaling is applied
afterwards, identically for the direct and the fast path, by
:func:`apply_normalization`:

``"none"``
    Raw sum (unnormalized by ``N``).  Divide by ``N`` yourself to get physical
    amplitudes.
``"legacy"``
    Raw sum multiplied by ``N``.  Reproduces the historical scale step, which
    multiplied by ``N`` although it was documented as a division.
``"forward"``
    Raw sum divided by ``N``.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np


NORMALIZATIONS: Tuple[str, ...] = ("none", "legacy", "forward")


def rotation_matrix(N: int) -> np.ndarray:
    """Full rotation matrix ``W[k, n] = exp(+i 2 pi k n / N)``, shape ``(N, N)``.

    The product ``k*n`` is reduced modulo ``N`` before the angle is formed so that
    large harmonics keep full precision.
    """
    N = int(N)
    if N <= 0:
        raise ValueError(f"N must be > 0, got {N}")
    idx = np.arange(N, dtype=np.int64)
    kn = np.outer(idx, idx) % N
    angle = 2.0 * np.pi * kn.astype(float) / float(N)
    W = np.empty((N, N), dtype=np.complex128)
    W.real = np.cos(angle)
    W.imag = np.sin(angle)
    return W


def direct_transform(buffer: np.ndarray) -> np.ndarray:
    """Raw DFT of a real working buffer by explicit matrix accumulation.

    Parameters
    ----------
    buffer:
        1D real array of length ``N`` (already zero-padded).

    Returns
    -------
    np.ndarray
        Complex coefficients of shape ``(N,)``, not normalized.
    """
    x = np.asarray(buffer, dtype=float)
    if x.ndim != 1:
        raise ValueError(f"buffer must be 1D, got shape {x.shape}")
    N = x.size
    if N == 0:
        raise ValueError("buffer must not be empty")

    W = rotation_matrix(N)
    return W @ x


def apply_normalization(raw: np.ndarray, mode: str = "none") -> np.ndarray:
    """Scale a raw coefficient sum according to ``mode``.

    Always returns a new array; ``raw`` is not modified.
    """
    mode = check_normalization(mode)
    X = np.array(raw, dtype=np.complex128, copy=True)
    N = X.size
    if mode == "legacy":
        X *= float(N)
    elif mode == "forward" and N > 0:
        X /= float(N)
    return X


def check_normalization(mode: str) -> str:
    m = str(mode).strip().lower()
    if m not in NORMALIZATIONS:
        raise ValueError(f"Unknown normalization: {mode!r} (expected one of {NORMALIZATIONS})")
    return m
