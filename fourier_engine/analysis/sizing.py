"""Working-length rules for the transform engine.

A size rule maps the number of samples a caller asks for to the length the
transform actually runs on.  Strategies pick one of these and expose it as
their ``calc_size``.
"""

from __future__ import annotations

import numbers


def check_requested_size(requested_size: int) -> int:
    if isinstance(requested_size, bool) or not isinstance(requested_size, numbers.Integral):
        raise ValueError(f"requested_size must be an integer, got {requested_size!r}")
    n = int(requested_size)
    if n <= 0:
        raise ValueError(f"requested_size must be > 0, got {n}")
    return n


def next_power_of_two(requested_size: int) -> int:
    """Smallest power of two that is ``>= requested_size``."""
    n = check_requested_size(requested_size)
    return 1 << (n - 1).bit_length()


def identity_size(requested_size: int) -> int:
    """Working length equal to the requested size (no padding constraint)."""
    return check_requested_size(requested_size)


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0
