"""Validation utilities.

This package contains *non-interactive* tooling for cross-checking fast
transform strategies against the reference DFT.

Design goals
------------
1) Keep validation code out of the engine path.
2) Make comparisons reproducible and scriptable (CLI-style entry points).
3) Use deterministic signals (seeded noise, exact-bin tones).
"""

from .cross_check import CrossCheckResult, cross_validate, generate_report
from .signals import impulse, noise, standard_signals, tone, zeros

__all__ = [
    "CrossCheckResult",
    "cross_validate",
    "generate_report",
    "impulse",
    "noise",
    "standard_signals",
    "tone",
    "zeros",
]
