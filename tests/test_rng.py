import random

import pytest

from fakekit.rng import AlwaysTrueRng, random_bool


def take(iterator, count):
    return [next(iterator) for _ in range(count)]


def test_rng_bool():
    rng = AlwaysTrueRng()
    assert take(rng.bools(), 6) == [True, True, True, True, True, True]


def test_rng_bool_wrap_large_increment():
    increment = 1 << 31
    rng = AlwaysTrueRng(1, increment + 1)
    for i, value in enumerate(take(rng.bools(), 10000)):
        assert value, f"i = {i}"


def test_rng_int():
    rng = AlwaysTrueRng()
    assert take(rng.u64s(), 6) == [
        1 << 31,
        ((1 << 31) * 3) + 1,
        ((1 << 31) * 5) + 2,
        ((1 << 31) * 7) + 3,
        ((1 << 31) * 9) + 4,
        ((1 << 31) * 11) + 5,
    ]


def test_rng_int_wrap():
    increment = 1 << 31
    rng = AlwaysTrueRng((increment * 2) - 2, 1)
    assert take(rng.u64s(), 5) == [
        (increment * 2) - 2,
        (increment * 2) - 1,
        increment * 3,
        (increment * 3) + 1,
        (increment * 3) + 2,
    ]


def test_option_never_none_sequence():
    rng = AlwaysTrueRng()
    assert rng.next_bool() is True
    assert rng.next_u64() == 6442450945


def test_values_wrap_at_64_bits():
    rng = AlwaysTrueRng((1 << 64) - 1, 1)
    values = take(rng.u64s(), 3)
    assert all(0 <= v < (1 << 64) for v in values)
    assert all(v & (1 << 31) for v in values)


def test_next_u32_is_low_half_of_u64():
    first = AlwaysTrueRng()
    second = AlwaysTrueRng()
    for _ in range(20):
        assert first.next_u32() == second.next_u64() & 0xFFFFFFFF


def test_fill_bytes_full_word():
    rng = AlwaysTrueRng()
    assert rng.fill_bytes(8) == (1 << 31).to_bytes(8, "little")


def test_fill_bytes_lengths():
    for size in range(0, 20):
        assert len(AlwaysTrueRng().fill_bytes(size)) == size


def test_fill_bytes_short_tail_uses_u32():
    reference = AlwaysTrueRng()
    expected = reference.next_u64().to_bytes(8, "little") + reference.next_u32().to_bytes(4, "little")[:3]
    assert AlwaysTrueRng().fill_bytes(11) == expected


def test_fill_bytes_long_tail_uses_u64():
    reference = AlwaysTrueRng()
    expected = reference.next_u64().to_bytes(8, "little")[:6]
    assert AlwaysTrueRng().fill_bytes(6) == expected


def test_fill_bytes_negative_size():
    with pytest.raises(ValueError):
        AlwaysTrueRng().fill_bytes(-1)


def test_random_bool_with_standard_random_is_deterministic():
    first = [random_bool(random.Random(7)) for _ in range(1)]
    a = random.Random(42)
    b = random.Random(42)
    assert [random_bool(a) for _ in range(50)] == [random_bool(b) for _ in range(50)]
    assert first == [random_bool(random.Random(7))]


def test_random_bool_with_standard_random_yields_both():
    rng = random.Random(1)
    draws = {random_bool(rng) for _ in range(200)}
    assert draws == {True, False}


def test_random_bool_with_always_true_rng():
    rng = AlwaysTrueRng(0, 1)
    assert all(random_bool(rng) for _ in range(100))