"""Golden-output regression tests for the four/five round squares mixers."""

import pytest

from squares_rng import DEFAULT_KEY, mix32, mix64
from squares_rng.mixing import MASK64

MAX_COUNTER = (1 << 64) - 1

GOLDEN_32 = {
    0: 920159078,
    1: 2487686880,
    2: 3366515936,
    3: 902588010,
    4: 1888807601,
    MAX_COUNTER: 1128597156,
}

GOLDEN_64 = {
    0: 3952053150598706085,
    1: 10684533792529506218,
    2: 14459075848319685823,
    3: 3876585987581790221,
    4: 8112366878148429639,
    MAX_COUNTER: 4847287876544065568,
}


@pytest.mark.parametrize("counter, expected", sorted(GOLDEN_32.items()))
def test_mix32_golden_values(counter, expected):
    assert mix32(counter, DEFAULT_KEY) == expected


@pytest.mark.parametrize("counter, expected", sorted(GOLDEN_64.items()))
def test_mix64_golden_values(counter, expected):
    assert mix64(counter, DEFAULT_KEY) == expected


def test_mixers_are_deterministic_across_boundaries():
    for counter in (0, 1, 2**32 - 1, 2**32, 2**63, MAX_COUNTER):
        for key in (0, 1, DEFAULT_KEY, MAX_COUNTER):
            assert mix32(counter, key) == mix32(counter, key)
            assert mix64(counter, key) == mix64(counter, key)


def test_outputs_fit_their_width():
    for counter in range(2000):
        assert 0 <= mix32(counter, DEFAULT_KEY) < 2**32
        assert 0 <= mix64(counter, DEFAULT_KEY) < 2**64


def test_inputs_wrap_modulo_2_64():
    assert mix32(MAX_COUNTER + 1, DEFAULT_KEY) == mix32(0, DEFAULT_KEY)
    assert mix64(-1, DEFAULT_KEY) == mix64(MAX_COUNTER, DEFAULT_KEY)
    assert mix32(7, DEFAULT_KEY + (1 << 64)) == mix32(7, DEFAULT_KEY)


def test_key_changes_the_stream():
    other_key = 0x9E3779B97F4A7C15
    ours = [mix32(c, DEFAULT_KEY) for c in range(16)]
    theirs = [mix32(c, other_key) for c in range(16)]
    assert ours != theirs


def test_mix64_is_not_two_stitched_mix32_draws():
    for counter in range(64):
        stitched = (mix32(counter, DEFAULT_KEY) << 32) | mix32(counter + 1, DEFAULT_KEY)
        assert mix64(counter, DEFAULT_KEY) != stitched & MASK64


def test_mix32_output_bits_are_balanced():
    draws = 20000
    ones = [0] * 32
    for counter in range(draws):
        value = mix32(counter, DEFAULT_KEY)
        for bit in range(32):
            ones[bit] += (value >> bit) & 1

    for count in ones:
        assert 0.46 * draws < count < 0.54 * draws
