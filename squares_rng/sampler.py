"""Unbiased bounded integers from full-width raw draws (Lemire's method)."""

from typing import Callable


def check_bound(bound: int, bits: int) -> None:
    # bound == 0 has no valid output; fail before any draw is consumed
    if not 0 < bound < (1 << bits):
        raise ValueError(
            f"bound must satisfy 0 < bound < 2**{bits}, received {bound!r}"
        )


def rejection_threshold(bound: int, bits: int = 32) -> int:
    """Low-half cutoff below which a product is biased; zero for powers of two."""
    check_bound(bound, bits)
    return (-bound & ((1 << bits) - 1)) % bound


def bounded_from_raw(raw: int, bound: int, draw: Callable[[], int], bits: int = 32) -> int:
    """Map ``raw`` into [0, bound), pulling extra values from ``draw`` on rejection.

    ``raw`` and every value returned by ``draw`` must be uniform over
    [0, 2**bits). The common case returns after a single multiply; only a
    product whose low half falls under the rejection threshold retries, and
    each retry consumes one more draw.
    """
    check_bound(bound, bits)
    mask = (1 << bits) - 1
    if not 0 <= raw <= mask:
        raise ValueError(f"raw must satisfy 0 <= raw < 2**{bits}, received {raw!r}")

    m = raw * bound
    lo = m & mask
    if lo < bound:
        threshold = (-bound & mask) % bound
        while lo < threshold:
            m = draw() * bound
            lo = m & mask

    return m >> bits
