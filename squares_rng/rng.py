"""Stateful Squares generator around an atomically advanced counter."""

import threading
from typing import MutableSequence, Sequence, TypeVar

from .mixing import DEFAULT_KEY, MASK32, MASK64, mix32, mix64
from .models import RandomResult
from .sampler import bounded_from_raw, check_bound

T = TypeVar("T")


class Rng:
    """Counter-based generator: draw ``n`` consumes counter ``start + n``.

    The counter is the only mutable state. Every raw draw advances it by
    exactly one (wrapping at 2**64), so concurrent callers sharing one
    instance never observe the same counter. The lock guards the counter
    update only; mixing runs outside of it.

    Not cryptographically secure.
    """

    __slots__ = ("_counter", "_key", "_lock")

    def __init__(self, key: int = DEFAULT_KEY) -> None:
        self._key = key & MASK64
        self._counter = 0
        self._lock = threading.Lock()

    @classmethod
    def with_counter(cls, counter: int, key: int = DEFAULT_KEY) -> "Rng":
        """Resume a stream from a previously saved ``counter``."""
        rng = cls(key)
        rng._counter = counter & MASK64
        return rng

    @classmethod
    def default(cls) -> "Rng":
        return cls(DEFAULT_KEY)

    @property
    def key(self) -> int:
        return self._key

    def counter(self) -> int:
        with self._lock:
            return self._counter

    def set_counter(self, counter: int) -> int:
        """Swap in a new counter and return the previous one."""
        with self._lock:
            previous, self._counter = self._counter, counter & MASK64
        return previous

    def _fetch_add(self) -> int:
        with self._lock:
            current = self._counter
            self._counter = (current + 1) & MASK64
        return current

    # -- raw draws -----------------------------------------------------------

    def next_u32(self) -> int:
        return mix32(self._fetch_add(), self._key)

    def next_full_u32(self) -> RandomResult:
        counter = self._fetch_add()
        return RandomResult(counter, mix32(counter, self._key))

    def next_u64(self) -> int:
        return mix64(self._fetch_add(), self._key)

    def next_full_u64(self) -> RandomResult:
        counter = self._fetch_add()
        return RandomResult(counter, mix64(counter, self._key))

    # -- bounded draws -------------------------------------------------------

    def next_u32_up(self, bound: int) -> int:
        """Uniform integer in [0, bound). Retries advance the counter further.

        ``bound`` must be in [1, 2**32); zero raises ``ValueError`` and
        leaves the counter untouched.
        """
        check_bound(bound, 32)
        return bounded_from_raw(self.next_u32(), bound, self.next_u32, 32)

    def next_u64_up(self, bound: int) -> int:
        """Uniform integer in [0, bound) for ``bound`` in [1, 2**64)."""
        check_bound(bound, 64)
        return bounded_from_raw(self.next_u64(), bound, self.next_u64, 64)

    # -- conveniences --------------------------------------------------------

    def random(self) -> float:
        """Float in [0, 1) built from the top 53 bits of one 64-bit draw."""
        return (self.next_u64() >> 11) * (1.0 / 9007199254740992.0)

    def randint(self, a: int, b: int) -> int:
        # inclusive a..b
        span = b - a + 1
        if span <= 0:
            raise ValueError(f"randint requires a <= b, received {a}..{b}")
        if span <= MASK32:
            return a + self.next_u32_up(span)
        if span <= MASK64:
            return a + self.next_u64_up(span)
        if span == MASK64 + 1:
            return a + self.next_u64()
        raise ValueError(f"randint span {span} exceeds 2**64")

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("cannot choose from an empty sequence")
        return seq[self.randint(0, len(seq) - 1)]

    def shuffle(self, seq: MutableSequence) -> None:
        """In-place Fisher-Yates shuffle."""
        for i in range(len(seq) - 1, 0, -1):
            j = self.randint(0, i)
            seq[i], seq[j] = seq[j], seq[i]

    def __repr__(self) -> str:
        return f"Rng(counter={self.counter()}, key={self._key:#018x})"
