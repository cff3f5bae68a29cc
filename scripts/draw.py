"""Command line harness for replaying Squares RNG streams."""

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "draw_logs" / "latest_draws.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from squares_rng import DEFAULT_KEY, StreamConfig, run_stream


def _parse_u64(value: str) -> int:
    """Accept decimal or 0x-prefixed hex values that fit in 64 bits."""

    try:
        parsed = int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Expected an integer (decimal or 0x hex), received '{value}'."
        ) from exc

    if not 0 <= parsed < 1 << 64:
        raise argparse.ArgumentTypeError(f"Value must fit in 64 bits: {value}")
    return parsed


def _parse_bound(value: str) -> int:
    bound = _parse_u64(value)
    if bound == 0:
        raise argparse.ArgumentTypeError("Bound must be a positive integer.")
    return bound


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw a reproducible Squares RNG stream")
    parser.add_argument(
        "--key",
        type=_parse_u64,
        default=DEFAULT_KEY,
        help="Mixing key (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument(
        "--counter",
        type=_parse_u64,
        default=0,
        help="Counter consumed by the first draw",
    )
    parser.add_argument("--count", type=int, default=10, help="Number of values to draw")
    parser.add_argument(
        "--width",
        type=int,
        choices=(32, 64),
        default=32,
        help="Raw output width in bits",
    )
    parser.add_argument(
        "--bound",
        type=_parse_bound,
        default=None,
        help="Draw unbiased values in [0, bound) instead of raw output",
    )
    parser.add_argument(
        "--full",
        action="store_true",
        help="Record the counter consumed by each draw",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "draw_logs/latest_draws.json under the repository root."
        ),
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    if args.count < 0:
        parser.error("--count must be non-negative")
    if args.bound is not None and args.bound >= 1 << args.width:
        parser.error(f"--bound must be below 2**{args.width} for --width {args.width}")

    cfg = StreamConfig(
        key=args.key,
        counter=args.counter,
        count=args.count,
        width=args.width,
        bound=args.bound,
        full=args.full,
    )
    result = run_stream(cfg)

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
