"""Reproducible draw reports: a config in, a JSON-ready dict out."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from .mixing import DEFAULT_KEY, MASK64
from .rng import Rng


@dataclass
class StreamConfig:
    """Everything needed to replay a stream: key, start counter and shape."""

    key: int = DEFAULT_KEY
    counter: int = 0
    count: int = 10
    width: int = 32  # 32 or 64 bit raw draws
    bound: Optional[int] = None  # draw in [0, bound) when set
    full: bool = False  # record the counter consumed by each draw


def run_stream(cfg: StreamConfig) -> Dict[str, Any]:
    """Draw ``cfg.count`` values starting at ``cfg.counter``."""

    if cfg.width not in (32, 64):
        raise ValueError(f"width must be 32 or 64, received {cfg.width}")
    if cfg.count < 0:
        raise ValueError(f"count must be non-negative, received {cfg.count}")

    rng = Rng.with_counter(cfg.counter, cfg.key)
    draws: List[Dict[str, int]] = []

    for _ in range(cfg.count):
        start = rng.counter()
        if cfg.bound is not None:
            if cfg.width == 32:
                value = rng.next_u32_up(cfg.bound)
            else:
                value = rng.next_u64_up(cfg.bound)
            entry = {"value": value}
            if cfg.full:
                # bounded draws may consume several counters on rejection
                entry["counter"] = start
                entry["steps"] = (rng.counter() - start) & MASK64
        else:
            result = rng.next_full_u32() if cfg.width == 32 else rng.next_full_u64()
            entry = asdict(result) if cfg.full else {"value": result.value}
        draws.append(entry)

    return {
        "config": asdict(cfg),
        "final": {
            "counter": rng.counter(),
            "key": rng.key,
        },
        "draws": draws,
    }


if __name__ == "__main__":
    import json

    print(json.dumps(run_stream(StreamConfig()), indent=2))
