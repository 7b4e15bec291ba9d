"""Fourier Engine -- discrete Fourier transform of real sample buffers.

This package provides tools for:
- Deriving the working transform length from a requested sample count
- Precomputing the rotor (twiddle-factor) table once per engine
- Running a brute-force reference DFT for validation
- Running a pluggable fast transform (radix-2, Bluestein, numpy)
- Deriving amplitude, power and phase spectra from the coefficients
- Cross-checking fast strategies against the reference

Key principles:
- Coefficients are the raw sum unless a normalization is configured
- Direct and fast paths are scaled identically
- Oversize inputs are rejected without touching engine state

Main subpackages:
- analysis: Size rules, rotors, transforms, engine, spectrum views
- models: Data models (EngineProfile, SpectrumResult)
- validation: Test signals and direct-vs-fast cross-check tooling
"""

from .analysis import FourierEngine
from .models import EngineProfile, SpectrumResult

__all__ = [
    "FourierEngine",
    "EngineProfile",
    "SpectrumResult",
]
