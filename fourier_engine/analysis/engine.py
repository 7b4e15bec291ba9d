"""Transform engine: working buffer, rotor table and coefficient state.

A :class:`FourierEngine` is built once for a requested sample count.  The
working length ``N`` and the rotor table are fixed at construction; every
successful :meth:`~FourierEngine.run_direct` / :meth:`~FourierEngine.run_fast`
call rebuilds the zero-padded working buffer and replaces the coefficients.

Rejected calls (more samples than ``N``) return ``False`` and leave buffer and
coefficients untouched, so a caller may retry with a shorter input.

Engines are not thread-safe; use one instance per thread.
"""

from __future__ import annotations

import numbers
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from fourier_engine.models.profile import EngineProfile
from fourier_engine.models.results import SpectrumResult

from .direct import apply_normalization, check_normalization, direct_transform
from .rotors import build_rotors
from .sizing import check_requested_size
from .spectrum import amplitude, phase, power_spectrum
from .strategies import FastTransformStrategy, Radix2Strategy, StrategyContractError, get_strategy


StrategyLike = Union[FastTransformStrategy, str, None]


def _resolve_strategy(strategy: StrategyLike) -> FastTransformStrategy:
    if strategy is None:
        return Radix2Strategy()
    if isinstance(strategy, str):
        return get_strategy(strategy)
    for attr in ("calc_size", "fft"):
        if not callable(getattr(strategy, attr, None)):
            raise ValueError(f"strategy {strategy!r} does not provide {attr}()")
    return strategy


class FourierEngine:
    """DFT engine over a fixed working length.

    Parameters
    ----------
    requested_size:
        Number of samples the caller intends to transform (> 0).
    strategy:
        Fast-transform strategy instance, registry name (``"radix2"``,
        ``"bluestein"``, ``"numpy"``, ``"direct"``) or None for radix-2.
    normalization:
        ``"none"``, ``"legacy"`` or ``"forward"``; see
        :mod:`fourier_engine.analysis.direct`.  Applied to both transforms.

    Examples
    --------
    >>> eng = FourierEngine(6)
    >>> eng.size()
    8
    >>> eng.run_fast([1.0, 0.0, 0.0])
    True
    >>> eng.run_fast([0.0] * 9)
    False
    """

    #: Oldest diagnostics are dropped beyond this many entries.
    max_warnings: int = 200

    def __init__(
        self,
        requested_size: int,
        strategy: StrategyLike = None,
        *,
        normalization: str = "none",
    ) -> None:
        requested = check_requested_size(requested_size)
        self._strategy = _resolve_strategy(strategy)
        self._normalization = check_normalization(normalization)

        N = self._strategy.calc_size(requested)
        if isinstance(N, bool) or not isinstance(N, (int, np.integer)) or int(N) < requested:
            raise StrategyContractError(
                f"{self.strategy_name}.calc_size({requested}) returned {N!r}; "
                f"expected an integer >= {requested}"
            )
        self._size = int(N)
        self._requested_size = requested

        self._rotors = build_rotors(self._size)
        self._buffer = np.zeros(self._size, dtype=float)
        self._coeff = np.zeros(0, dtype=np.complex128)
        self._warnings: List[str] = []

    @classmethod
    def from_profile(cls, profile: EngineProfile) -> "FourierEngine":
        """Build an engine from an :class:`EngineProfile`."""
        return cls(
            profile.requested_size,
            profile.strategy,
            normalization=profile.normalization,
        )

    def __repr__(self) -> str:
        return (
            f"FourierEngine(size={self._size}, strategy={self.strategy_name!r}, "
            f"normalization={self._normalization!r})"
        )

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def run_direct(self, samples: Sequence[float], sample_count: Optional[int] = None) -> bool:
        """Transform ``samples`` with the O(N^2) reference DFT.

        Returns False without touching any state if ``sample_count`` exceeds the
        working length.
        """
        buf = self._prepare_buffer(samples, sample_count, "run_direct")
        if buf is None:
            return False
        self._commit(buf, direct_transform(buf), "direct")
        return True

    def run_fast(self, samples: Sequence[float], sample_count: Optional[int] = None) -> bool:
        """Transform ``samples`` with the configured fast strategy.

        Same precondition and buffer semantics as :meth:`run_direct`.
        """
        buf = self._prepare_buffer(samples, sample_count, "run_fast")
        if buf is None:
            return False
        raw = self._strategy.fft(buf, self._rotors)
        self._commit(buf, raw, self.strategy_name)
        return True

    # ------------------------------------------------------------------
    # Accessors (copies, no side effects)
    # ------------------------------------------------------------------

    def size(self) -> int:
        return self._size

    @property
    def requested_size(self) -> int:
        return self._requested_size

    def rotors(self) -> np.ndarray:
        return self._rotors.copy()

    def coefficients(self) -> np.ndarray:
        return self._coeff.copy()

    def buffer(self) -> np.ndarray:
        return self._buffer.copy()

    @property
    def strategy(self) -> FastTransformStrategy:
        return self._strategy

    @property
    def strategy_name(self) -> str:
        return str(getattr(self._strategy, "name", type(self._strategy).__name__))

    @property
    def normalization(self) -> str:
        return self._normalization

    @property
    def has_run(self) -> bool:
        """True once a transform has succeeded."""
        return self._coeff.size > 0

    @property
    def warnings(self) -> Tuple[str, ...]:
        return tuple(self._warnings)

    def clear_warnings(self) -> None:
        self._warnings.clear()

    # ------------------------------------------------------------------
    # Spectrum views
    # ------------------------------------------------------------------

    def amplitude(self) -> np.ndarray:
        return amplitude(self._coeff)

    def power_spectrum(self) -> np.ndarray:
        return power_spectrum(self._coeff)

    def phase(self) -> np.ndarray:
        return phase(self._coeff)

    def spectrum(self) -> SpectrumResult:
        """Snapshot of the current coefficients with all derived views."""
        amp = amplitude(self._coeff)
        return SpectrumResult(
            size=self._size,
            strategy=self.strategy_name,
            normalization=self._normalization,
            coefficients=self._coeff.copy(),
            amplitude=amp,
            power=amp * amp,
            phase=phase(self._coeff),
            warnings=self.warnings,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _warn(self, message: str) -> None:
        self._warnings.append(message)
        if len(self._warnings) > self.max_warnings:
            self._warnings = self._warnings[-self.max_warnings :]

    def _prepare_buffer(
        self,
        samples: Sequence[float],
        sample_count: Optional[int],
        caller: str,
    ) -> Optional[np.ndarray]:
        """Validate arguments and return a new zero-padded buffer, or None if oversize."""
        x = np.asarray(samples, dtype=float)
        if x.ndim != 1:
            raise ValueError(f"samples must be 1D, got shape {x.shape}")

        if sample_count is None:
            count = x.size
        elif isinstance(sample_count, bool) or not isinstance(sample_count, numbers.Integral):
            raise ValueError(f"sample_count must be an integer, got {sample_count!r}")
        else:
            count = int(sample_count)
        if count < 0:
            raise ValueError(f"sample_count must be >= 0, got {count}")
        if count > x.size:
            raise ValueError(f"sample_count={count} exceeds the {x.size} samples supplied")

        if count > self._size:
            self._warn(
                f"WARNING: {caller} rejected {count} samples (working length {self._size}); "
                "state unchanged"
            )
            return None

        buf = np.zeros(self._size, dtype=float)
        buf[:count] = x[:count]
        if not np.all(np.isfinite(buf)):
            n_bad = int(np.count_nonzero(~np.isfinite(buf)))
            self._warn(f"WARNING: {caller} input contains {n_bad} non-finite sample(s)")
        return buf

    def _commit(self, buf: np.ndarray, raw: np.ndarray, source: str) -> None:
        X = np.asarray(raw)
        if X.shape != (self._size,):
            raise StrategyContractError(
                f"{source} transform returned shape {X.shape}, expected ({self._size},)"
            )
        self._coeff = apply_normalization(X, self._normalization)
        self._buffer = buf
