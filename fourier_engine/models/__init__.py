from .profile import EngineProfile
from .results import SpectrumResult

__all__ = [
    "EngineProfile",
    "SpectrumResult",
]
