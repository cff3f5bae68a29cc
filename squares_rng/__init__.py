"""Public package surface for the Squares counter-based RNG."""

from .mixing import DEFAULT_KEY, mix32, mix64
from .models import RandomResult
from .rng import Rng
from .sampler import bounded_from_raw, rejection_threshold
from .stream import StreamConfig, run_stream

__all__ = [
    "DEFAULT_KEY",
    "RandomResult",
    "Rng",
    "StreamConfig",
    "bounded_from_raw",
    "mix32",
    "mix64",
    "rejection_threshold",
    "run_stream",
]
