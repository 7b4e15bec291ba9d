"""Transform analysis package.

Design principle:
  - The engine owns the working length, the rotor table, the zero-padded
    buffer and the coefficients.
  - Size rules, the reference transform, the fast strategies and the spectrum
    views are plain functions/classes the engine composes.

Data flows one way:
  samples -> working buffer -> (direct | fast) -> coefficients -> spectra.
"""

from .direct import NORMALIZATIONS, apply_normalization, direct_transform, rotation_matrix
from .engine import FourierEngine
from .rotors import build_rotors
from .sizing import identity_size, next_power_of_two
from .spectrum import amplitude, frequency_bins, phase, power_spectrum
from .strategies import (
    STRATEGIES,
    BluesteinStrategy,
    DirectStrategy,
    FastTransformStrategy,
    NumpyStrategy,
    Radix2Strategy,
    StrategyContractError,
    get_strategy,
)

__all__ = [
    "FourierEngine",
    "FastTransformStrategy",
    "Radix2Strategy",
    "BluesteinStrategy",
    "NumpyStrategy",
    "DirectStrategy",
    "StrategyContractError",
    "STRATEGIES",
    "get_strategy",
    "NORMALIZATIONS",
    "apply_normalization",
    "direct_transform",
    "rotation_matrix",
    "build_rotors",
    "identity_size",
    "next_power_of_two",
    "amplitude",
    "power_spectrum",
    "phase",
    "frequency_bins",
]
