r"""Twiddle-factor (rotor) table.

The table holds the base rotor of every harmonic of a length-``N`` transform,

.. math::

    W_k = e^{+i 2\pi k / N} = \cos(2\pi k/N) + i\,\sin(2\pi k/N),
    \qquad k = 0, \dots, N-1.

It is *not* the full ``N x N`` rotation matrix: algorithms combine ``W_k`` with
a sample index themselves (e.g. radix-2 stages read ``W[j * N/m]``).
"""

from __future__ import annotations

import numpy as np


def build_rotors(working_length: int) -> np.ndarray:
    """Build the read-only rotor table for a working length ``N``.

    Parameters
    ----------
    working_length:
        Transform length ``N`` (> 0).

    Returns
    -------
    np.ndarray
        Complex array of shape ``(N,)``.  Entry 0 is exactly ``1+0j``.  The array
        is marked non-writeable so strategies can share it without copying.
    """
    N = int(working_length)
    if N <= 0:
        raise ValueError(f"working_length must be > 0, got {N}")

    k = np.arange(N, dtype=float)
    angle = 2.0 * np.pi * k / float(N)
    rotors = np.empty(N, dtype=np.complex128)
    rotors.real = np.cos(angle)
    rotors.imag = np.sin(angle)
    rotors.flags.writeable = False
    return rotors
