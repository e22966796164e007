from battlecore.core.dice import roll_die, sum_rolls
from battlecore.core.rng import RNG

import pytest


def test_rng_determinism_same_seed() -> None:
    rng_a = RNG(12345)
    rng_b = RNG(12345)

    ints_a = [rng_a.randint(1, 100) for _ in range(5)]
    ints_b = [rng_b.randint(1, 100) for _ in range(5)]
    choices_a = [rng_a.choice(["a", "b", "c"]) for _ in range(5)]
    choices_b = [rng_b.choice(["a", "b", "c"]) for _ in range(5)]

    assert ints_a == ints_b
    assert choices_a == choices_b


def test_rng_different_seed() -> None:
    rng_a = RNG(11111)
    rng_b = RNG(22222)

    draws_a = [rng_a.randint(1, 100) for _ in range(5)]
    draws_b = [rng_b.randint(1, 100) for _ in range(5)]

    assert draws_a != draws_b


def test_percent_bounds() -> None:
    rng = RNG(3)
    assert not any(rng.percent(0) for _ in range(50))
    assert all(rng.percent(100) for _ in range(50))


def test_choice_rejects_empty_sequence() -> None:
    with pytest.raises(ValueError):
        RNG(1).choice([])


def test_roll_die_stays_on_six_faces() -> None:
    rng = RNG(5)
    faces = {roll_die(rng) for _ in range(200)}
    assert faces == {1, 2, 3, 4, 5, 6}


def test_sum_rolls_range_and_zero_count() -> None:
    rng = RNG(8)
    for _ in range(50):
        assert 3 <= sum_rolls(rng, 3) <= 18
    assert sum_rolls(rng, 0) == 0
    assert sum_rolls(rng, -2) == 0
