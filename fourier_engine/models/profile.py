"""Engine profile -- bundles all configuration that affects transform output.

An EngineProfile groups every parameter that changes the coefficients an engine
produces into one frozen dataclass.  It can be:

- Built directly or from keyword overrides
- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict for JSON provenance
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class EngineProfile:
    """Frozen configuration for one transform engine.

    Required fields
    ---------------
    requested_size : int
        Number of samples the caller intends to transform.  The working length
        is derived from it by the strategy's size rule.

    Optional fields (sensible defaults)
    ------------------------------------
    strategy : str
        Fast-transform strategy name, one of
        {"radix2", "bluestein", "numpy", "direct"}.
    normalization : str
        "none" (raw sum), "legacy" (raw sum times N) or "forward" (raw sum / N).
        Applied identically to the direct and fast transforms.
    rtol : float
        Relative tolerance used when cross-checking direct against fast
        (relative to the largest reference coefficient magnitude).
    atol : float
        Absolute tolerance floor for the same check.
    """

    requested_size: int

    strategy: str = "radix2"
    normalization: str = "none"

    rtol: float = 1e-9
    atol: float = 1e-9

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> EngineProfile:
        """Reconstruct from a dict (e.g. loaded from JSON).  Unknown keys are rejected."""
        d = dict(d)  # shallow copy
        known = set(cls.__dataclass_fields__)
        extra = sorted(set(d) - known)
        if extra:
            raise ValueError(f"Unknown EngineProfile fields: {extra}")
        return cls(**d)
