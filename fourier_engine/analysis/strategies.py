"""Pluggable fast-transform strategies.

The engine is agnostic to the algorithm computing its coefficients.  A strategy
provides exactly two capabilities:

- ``calc_size(requested_size)``: the working length it needs,
- ``fft(buffer, rotors)``: the raw (unnormalized) DFT of a zero-padded buffer,

and a ``name`` used in profiles, reports and the CLI.

Contract
--------
For a buffer of length ``N`` and the engine's rotor table of length ``N`` the
result must be a complex array of shape ``(N,)`` equal, within floating-point
tolerance, to :func:`~fourier_engine.analysis.direct.direct_transform` on the
same buffer.  Strategies must be deterministic and must not write to the rotor
table (it is read-only; a write raises).

Available strategies
--------------------
``radix2``     iterative decimation-in-time, pads to a power of two
``bluestein``  chirp-z for any length, built on the radix-2 kernel
``numpy``      ``N * numpy.fft.ifft`` (numpy's +i transform), any length
``direct``     the O(N^2) reference, any length (testing only)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Type

import numpy as np

from .direct import direct_transform
from .rotors import build_rotors
from .sizing import identity_size, is_power_of_two, next_power_of_two


class StrategyContractError(ValueError):
    """A strategy was called with, or returned, arrays that break the contract."""


class FastTransformStrategy(ABC):
    """Abstract base class for fast-transform strategies."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Strategy identifier (registry key)."""

    @abstractmethod
    def calc_size(self, requested_size: int) -> int:
        """Working length for a requested sample count."""

    @abstractmethod
    def fft(self, buffer: np.ndarray, rotors: np.ndarray) -> np.ndarray:
        """Raw DFT of ``buffer`` (length ``N``) using the ``N`` base rotors."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


def _check_inputs(buffer: np.ndarray, rotors: np.ndarray) -> tuple[np.ndarray, int]:
    x = np.asarray(buffer)
    if x.ndim != 1:
        raise StrategyContractError(f"buffer must be 1D, got shape {x.shape}")
    N = x.size
    if np.shape(rotors) != (N,):
        raise StrategyContractError(
            f"rotor table shape {np.shape(rotors)} does not match buffer length {N}"
        )
    return x, N


# ---------------------------------------------------------------------------
# Radix-2 kernel
# ---------------------------------------------------------------------------


def bit_reversal_permutation(N: int) -> np.ndarray:
    """Index array that reorders ``0..N-1`` by bit-reversed index (``N`` a power of two)."""
    if not is_power_of_two(N):
        raise ValueError(f"N must be a power of two, got {N}")
    n_bits = N.bit_length() - 1
    idx = np.arange(N, dtype=np.int64)
    rev = np.zeros(N, dtype=np.int64)
    for bit in range(n_bits):
        rev |= ((idx >> bit) & 1) << (n_bits - 1 - bit)
    return rev


def radix2_fft(x: np.ndarray, rotors: np.ndarray) -> np.ndarray:
    """Iterative decimation-in-time FFT of a complex or real sequence.

    Stage ``m`` (butterfly span) uses twiddles ``rotors[j * N/m]`` for
    ``j < m/2``, i.e. the base rotors sampled with stride ``N/m``.
    """
    N = int(np.size(x))
    if not is_power_of_two(N):
        raise StrategyContractError(f"radix-2 needs a power-of-two length, got {N}")

    a = np.asarray(x, dtype=np.complex128)[bit_reversal_permutation(N)]
    m = 2
    while m <= N:
        half = m // 2
        tw = rotors[0 : half * (N // m) : N // m]
        blocks = a.reshape(N // m, m)
        even = blocks[:, :half]
        odd = blocks[:, half:] * tw
        a = np.concatenate([even + odd, even - odd], axis=1).reshape(N)
        m *= 2
    return a


class Radix2Strategy(FastTransformStrategy):
    """Cooley-Tukey radix-2, working length padded to the next power of two."""

    @property
    def name(self) -> str:
        return "radix2"

    def calc_size(self, requested_size: int) -> int:
        return next_power_of_two(requested_size)

    def fft(self, buffer: np.ndarray, rotors: np.ndarray) -> np.ndarray:
        x, _ = _check_inputs(buffer, rotors)
        return radix2_fft(x, rotors)


# ---------------------------------------------------------------------------
# Bluestein (chirp-z)
# ---------------------------------------------------------------------------


class BluesteinStrategy(FastTransformStrategy):
    """Chirp-z transform for arbitrary ``N``.

    The DFT is rewritten as a circular convolution of length ``M >= 2N-1``
    (power of two), evaluated with the radix-2 kernel.  The chirp
    ``exp(+i pi n^2 / N)`` needs half-step angles that the length-``N`` rotor
    table does not hold, so the chirp is computed here; the engine rotors are
    only validated.
    """

    @property
    def name(self) -> str:
        return "bluestein"

    def calc_size(self, requested_size: int) -> int:
        return identity_size(requested_size)

    def fft(self, buffer: np.ndarray, rotors: np.ndarray) -> np.ndarray:
        x, N = _check_inputs(buffer, rotors)
        if N == 1:
            return np.asarray(x, dtype=np.complex128).copy()

        n = np.arange(N, dtype=np.int64)
        # n^2 mod 2N keeps the chirp angle small
        angle = np.pi * ((n * n) % (2 * N)).astype(float) / float(N)
        w = np.exp(1j * angle)

        M = next_power_of_two(2 * N - 1)
        conv_rotors = build_rotors(M)

        a = np.zeros(M, dtype=np.complex128)
        a[:N] = x * w
        b = np.zeros(M, dtype=np.complex128)
        b[:N] = np.conj(w)
        b[M - N + 1 :] = np.conj(w[1:])[::-1]

        prod = radix2_fft(a, conv_rotors) * radix2_fft(b, conv_rotors)
        # kernel inverse via conjugation: K^-1(y) = conj(K(conj(y))) / M
        c = np.conj(radix2_fft(np.conj(prod), conv_rotors)) / float(M)
        return c[:N] * w


class NumpyStrategy(FastTransformStrategy):
    """Delegate to ``numpy.fft.ifft`` scaled by ``N``; any length, rotors unused.

    ``ifft`` is numpy's +i transform, so ``N * ifft`` is the raw sum.
    """

    @property
    def name(self) -> str:
        return "numpy"

    def calc_size(self, requested_size: int) -> int:
        return identity_size(requested_size)

    def fft(self, buffer: np.ndarray, rotors: np.ndarray) -> np.ndarray:
        x, N = _check_inputs(buffer, rotors)
        return float(N) * np.fft.ifft(x)


class DirectStrategy(FastTransformStrategy):
    """The O(N^2) reference wrapped as a strategy (testing only)."""

    @property
    def name(self) -> str:
        return "direct"

    def calc_size(self, requested_size: int) -> int:
        return identity_size(requested_size)

    def fft(self, buffer: np.ndarray, rotors: np.ndarray) -> np.ndarray:
        x, _ = _check_inputs(buffer, rotors)
        return direct_transform(x)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

STRATEGIES: Dict[str, Type[FastTransformStrategy]] = {
    "radix2": Radix2Strategy,
    "bluestein": BluesteinStrategy,
    "numpy": NumpyStrategy,
    "direct": DirectStrategy,
}


def get_strategy(name: str) -> FastTransformStrategy:
    """Instantiate a strategy by registry name (case-insensitive)."""
    key = str(name).strip().lower()
    if key not in STRATEGIES:
        raise ValueError(f"Unknown strategy: {name!r} (expected one of {sorted(STRATEGIES)})")
    return STRATEGIES[key]()
