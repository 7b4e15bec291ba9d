"""Deterministic test signals for cross-checking transforms.

Every generator returns a float64 array of length ``n``.  ``tone`` places a
cosine exactly on a bin so its spectrum is two spikes (``bin`` and ``n - bin``).
"""

from __future__ import annotations

from typing import Dict

import numpy as np


def zeros(n: int) -> np.ndarray:
    return np.zeros(int(n), dtype=float)


def impulse(n: int, index: int = 0, value: float = 1.0) -> np.ndarray:
    """Unit impulse at ``index``; its DFT is flat with magnitude ``value``."""
    n = int(n)
    if not (0 <= index < n):
        raise ValueError(f"index must be in [0, {n - 1}], got {index}")
    x = np.zeros(n, dtype=float)
    x[index] = float(value)
    return x


def tone(n: int, bin: int, amplitude: float = 1.0, phase: float = 0.0) -> np.ndarray:
    """Cosine ``amplitude * cos(2 pi bin k / n + phase)`` sampled at ``k = 0..n-1``."""
    n = int(n)
    k = np.arange(n, dtype=float)
    return float(amplitude) * np.cos(2.0 * np.pi * float(bin) * k / float(n) + float(phase))


def noise(n: int, seed: int = 0) -> np.ndarray:
    """Standard normal noise from a seeded generator."""
    rng = np.random.default_rng(seed)
    return rng.standard_normal(int(n))


def standard_signals(n: int, seed: int = 0) -> Dict[str, np.ndarray]:
    """The signal set used by :func:`~fourier_engine.validation.cross_check.cross_validate`."""
    n = int(n)
    out: Dict[str, np.ndarray] = {
        "zeros": zeros(n),
        "impulse": impulse(n),
        "noise": noise(n, seed=seed),
    }
    if n >= 2:
        out["tone"] = tone(n, bin=max(1, n // 4), amplitude=1.0, phase=0.3)
    return out
