"""Direct-vs-fast parity runner.

This module provides a reusable API for:
1. Running the reference DFT and a fast strategy on the same deterministic signals
2. Measuring the disagreement per signal and working length
3. Writing a human-readable Markdown report

A strategy passes a signal when

.. code-block:: text

    max_k |X_direct[k] - X_fast[k]|  <=  rtol * max_k |X_direct[k]| + atol

Both transforms go through the same engine, so they share the working buffer
construction and the normalization step.
"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from fourier_engine.analysis.direct import NORMALIZATIONS
from fourier_engine.analysis.engine import FourierEngine
from fourier_engine.analysis.strategies import STRATEGIES
from fourier_engine.models.profile import EngineProfile
from fourier_engine.validation.signals import standard_signals


RESULT_COLUMNS = [
    "size",
    "signal",
    "n_samples",
    "max_abs_err",
    "max_rel_err",
    "ref_scale",
    "passed",
]


@dataclass
class CrossCheckResult:
    """Results from comparing the direct and fast transforms."""

    strategy: str
    normalization: str
    per_signal: pd.DataFrame
    passed: bool
    rtol: float
    atol: float
    warnings: Tuple[str, ...] = ()

    @property
    def worst(self) -> pd.Series:
        """Row with the largest relative error (empty Series if nothing ran)."""
        df = self.per_signal.dropna(subset=["max_rel_err"])
        if df.empty:
            return pd.Series(dtype=object)
        return df.loc[df["max_rel_err"].idxmax()]


def _compare(
    engine: FourierEngine,
    name: str,
    x: np.ndarray,
    *,
    rtol: float,
    atol: float,
    warnings: List[str],
) -> Dict[str, Any]:
    row: Dict[str, Any] = {
        "size": engine.size(),
        "signal": name,
        "n_samples": int(np.size(x)),
        "max_abs_err": np.nan,
        "max_rel_err": np.nan,
        "ref_scale": np.nan,
        "passed": False,
    }

    if not engine.run_direct(x):
        warnings.append(f"[{name}] direct transform rejected {np.size(x)} samples (N={engine.size()})")
        return row
    X_direct = engine.coefficients()
    if not engine.run_fast(x):
        warnings.append(f"[{name}] fast transform rejected {np.size(x)} samples (N={engine.size()})")
        return row
    X_fast = engine.coefficients()

    diff = float(np.max(np.abs(X_direct - X_fast)))
    scale = float(np.max(np.abs(X_direct)))
    if scale > 0.0:
        rel = diff / scale
    else:
        rel = 0.0 if diff == 0.0 else float("inf")

    row.update(
        max_abs_err=diff,
        max_rel_err=rel,
        ref_scale=scale,
        passed=bool(diff <= rtol * scale + atol),
    )
    return row


def cross_validate(
    target: Union[EngineProfile, FourierEngine],
    signals: Optional[Mapping[str, np.ndarray]] = None,
    *,
    lengths: Optional[Sequence[int]] = None,
    seed: int = 0,
    rtol: Optional[float] = None,
    atol: Optional[float] = None,
) -> CrossCheckResult:
    """Compare direct and fast transforms on a set of signals.

    Parameters
    ----------
    target : EngineProfile or FourierEngine
        Engine to check, or a profile to build it from.  Running the check
        overwrites the coefficients of an engine passed in.
    signals : mapping, optional
        ``name -> samples``.  Default: :func:`standard_signals` at the working
        length.
    lengths : sequence of int, optional
        Only with a profile: repeat the check for each requested size.
    seed : int
        Seed for the default noise signal.
    rtol, atol : float, optional
        Override the profile tolerances (defaults ``1e-9`` each).

    Returns
    -------
    CrossCheckResult
    """
    if isinstance(target, FourierEngine):
        if lengths is not None:
            raise ValueError("lengths can only be used with an EngineProfile")
        engines = [target]
        rtol = 1e-9 if rtol is None else float(rtol)
        atol = 1e-9 if atol is None else float(atol)
    else:
        profile = target
        rtol = profile.rtol if rtol is None else float(rtol)
        atol = profile.atol if atol is None else float(atol)
        sizes = [profile.requested_size] if lengths is None else [int(n) for n in lengths]
        engines = [
            FourierEngine.from_profile(dataclasses.replace(profile, requested_size=n)) for n in sizes
        ]

    rows: List[Dict[str, Any]] = []
    warnings: List[str] = []
    for eng in engines:
        sigs = standard_signals(eng.size(), seed=seed) if signals is None else signals
        for name, x in sigs.items():
            rows.append(_compare(eng, name, np.asarray(x, dtype=float), rtol=rtol, atol=atol, warnings=warnings))

    df = pd.DataFrame(rows, columns=RESULT_COLUMNS)
    passed = bool(len(df) > 0 and df["passed"].all())

    return CrossCheckResult(
        strategy=engines[0].strategy_name,
        normalization=engines[0].normalization,
        per_signal=df,
        passed=passed,
        rtol=rtol,
        atol=atol,
        warnings=tuple(warnings),
    )


def generate_report(result: CrossCheckResult, output_path: Path, *, title: str = "Cross-check") -> Path:
    """Write a Markdown report of a :class:`CrossCheckResult`.

    Returns
    -------
    Path
        Path to the written report.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    lines = [
        f"# {title}: direct vs {result.strategy}",
        "",
        f"Generated: {datetime.now(timezone.utc).isoformat()}",
        "",
        "## Summary",
        "",
        f"- **Status**: {'PASSED' if result.passed else 'FAILED'}",
        f"- **Normalization**: {result.normalization}",
        f"- **Tolerance**: rtol={result.rtol:g}, atol={result.atol:g}",
        f"- **Checks**: {len(result.per_signal)}",
        "",
        "## Per signal",
        "",
        "| N | Signal | Samples | Max Abs Error | Max Rel Error | Passed |",
        "|---|--------|---------|---------------|---------------|--------|",
    ]

    for _, row in result.per_signal.iterrows():
        lines.append(
            f"| {row['size']} | {row['signal']} | {row['n_samples']} | "
            f"{row['max_abs_err']:.3e} | {row['max_rel_err']:.3e} | "
            f"{'yes' if row['passed'] else 'no'} |"
        )
    lines.append("")

    if result.warnings:
        lines.extend(["## Warnings", ""])
        for msg in result.warnings:
            lines.append(f"- {msg}")
        lines.append("")

    with open(output_path, "w") as f:
        f.write("\n".join(lines))

    return output_path


def _parse_sizes_csv(s: str) -> List[int]:
    toks = [t.strip() for t in re.split(r"[\s,;]+", s.strip()) if t.strip()]
    return [int(t) for t in toks]


def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse
    import textwrap

    p = argparse.ArgumentParser(
        prog="python -m fourier_engine.validation.cross_check",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Cross-check a fast transform strategy against the reference DFT.

            For each requested size the engine transforms a zero signal, a unit
            impulse, an exact-bin tone and seeded noise with both paths and
            reports the largest disagreement.
            """
        ),
    )

    p.add_argument("--sizes", default="64", help="Comma-separated requested sizes (e.g. '8,12,64')")
    p.add_argument("--strategy", default="radix2", choices=sorted(STRATEGIES), help="Fast strategy")
    p.add_argument("--normalization", default="none", choices=list(NORMALIZATIONS), help="Coefficient scaling")
    p.add_argument("--seed", type=int, default=0, help="Seed for the noise signal")
    p.add_argument("--rtol", type=float, default=1e-9, help="Relative tolerance")
    p.add_argument("--atol", type=float, default=1e-9, help="Absolute tolerance")
    p.add_argument("--report", default=None, help="Optional Markdown report path")

    ns = p.parse_args(list(argv) if argv is not None else None)

    sizes = _parse_sizes_csv(ns.sizes)
    if not sizes:
        p.error("--sizes must list at least one size")

    profile = EngineProfile(
        requested_size=sizes[0],
        strategy=ns.strategy,
        normalization=ns.normalization,
        rtol=float(ns.rtol),
        atol=float(ns.atol),
    )
    result = cross_validate(profile, lengths=sizes, seed=ns.seed)

    for _, row in result.per_signal.iterrows():
        tag = "info" if row["passed"] else "warn"
        print(
            f"[{tag}] N={row['size']} {row['signal']}: "
            f"max |dX|={row['max_abs_err']:.3g}, rel={row['max_rel_err']:.3g}"
        )
    for msg in result.warnings:
        print(f"[warn] {msg}")

    if ns.report:
        out = generate_report(result, Path(ns.report))
        print(f"[info] wrote report: {out}")

    print(f"[info] {result.strategy}: {'PASSED' if result.passed else 'FAILED'}")
    return 0 if result.passed else 1


if __name__ == "__main__":
    raise SystemExit(main())
