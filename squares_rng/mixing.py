# Squares: counter-based Middle Square Weyl Sequence mixing (no external deps)
# Source: Widynski, "Squares: A Fast Counter-Based RNG", arXiv:2004.06278

MASK32 = (1 << 32) - 1
MASK64 = (1 << 64) - 1

# Near-equal count of zero and one bits; any such irregular pattern works.
DEFAULT_KEY = 0x548C9DECBCE65297


def _swap_halves(x: int) -> int:
    return (x >> 32) | ((x << 32) & MASK64)


def mix32(counter: int, key: int) -> int:
    """Four-round squares output for ``counter`` under ``key``, in [0, 2**32)."""
    key &= MASK64
    x = y = (counter * key) & MASK64
    z = (y + key) & MASK64

    x = _swap_halves((x * x + y) & MASK64)
    x = _swap_halves((x * x + z) & MASK64)
    x = _swap_halves((x * x + y) & MASK64)

    return ((x * x + z) & MASK64) >> 32


def mix64(counter: int, key: int) -> int:
    """Five-round squares output, one counter step per full 64-bit value."""
    key &= MASK64
    x = y = (counter * key) & MASK64
    z = (y + key) & MASK64

    x = _swap_halves((x * x + y) & MASK64)
    x = _swap_halves((x * x + z) & MASK64)
    x = _swap_halves((x * x + y) & MASK64)
    t = x = (x * x + z) & MASK64
    x = _swap_halves(x)

    # upper half of the last square lands in the low word of t
    return t ^ (((x * x + y) & MASK64) >> 32)
