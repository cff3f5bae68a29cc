from dataclasses import dataclass


@dataclass(frozen=True)
class RandomResult:
    """A drawn value together with the counter consumed to produce it."""

    counter: int
    value: int
