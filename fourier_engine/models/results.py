from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from fourier_engine.analysis.spectrum import frequency_bins


@dataclass(frozen=True)
class SpectrumResult:
    """Snapshot of an engine's coefficients and the views derived from them.

    Attributes
    ----------
    size:
        Working length ``N``.
    strategy:
        Name of the fast-transform strategy configured on the engine.
    normalization:
        Normalization mode applied to ``coefficients``.
    coefficients:
        Complex coefficients, shape ``(N,)`` (empty if no transform has run).
    amplitude, power, phase:
        Float arrays of the same length as ``coefficients``.
    warnings:
        Diagnostics collected by the engine up to the snapshot.
    """

    size: int
    strategy: str
    normalization: str

    coefficients: np.ndarray
    amplitude: np.ndarray
    power: np.ndarray
    phase: np.ndarray

    warnings: Tuple[str, ...] = ()

    def to_frame(self, sample_rate: Optional[float] = None) -> pd.DataFrame:
        """One row per bin.

        Columns: ``bin``, optional ``frequency`` (if ``sample_rate`` is given),
        ``re``, ``im``, ``amplitude``, ``power``, ``phase``.
        """
        n = int(self.coefficients.size)
        out = {"bin": np.arange(n, dtype=int)}
        if sample_rate is not None:
            out["frequency"] = frequency_bins(n, sample_rate=sample_rate)
        out["re"] = np.real(self.coefficients)
        out["im"] = np.imag(self.coefficients)
        out["amplitude"] = self.amplitude
        out["power"] = self.power
        out["phase"] = self.phase
        return pd.DataFrame(out)
