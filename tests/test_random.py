import itertools
import random as std_random

import pytest

from turbokit.random import I64_MAX, I64_MIN, U32_MAX, U64_MAX, Random


def _seq(*values):
    it = itertools.cycle(values)
    return lambda: next(it)


def _seeded(seed=1234):
    gen = std_random.Random(seed)
    return Random(lambda: gen.getrandbits(32))


def test_u32_masks_source_to_32_bits():
    rng = Random(_seq((1 << 32) + 5))
    assert rng.u32() == 5


def test_u64_combines_low_word_first():
    rng = Random(_seq(1, 2))
    assert rng.u64() == (2 << 32) | 1


def test_all_ones_source_gives_maximum_unsigned_values():
    rng = Random(_seq(U32_MAX))
    assert rng.u32() == U32_MAX
    assert rng.u64() == U64_MAX


def test_narrow_integer_ranges_hold():
    rng = _seeded()
    for _ in range(500):
        assert 0 <= rng.u8() <= 0xFF
        assert 0 <= rng.u16() <= 0xFFFF
        assert -(1 << 7) <= rng.i8() < (1 << 7)
        assert -(1 << 15) <= rng.i16() < (1 << 15)
        assert -(1 << 31) <= rng.i32() < (1 << 31)
        assert I64_MIN <= rng.i64() <= I64_MAX


def test_signed_values_wrap_from_all_ones():
    rng = Random(_seq(U32_MAX))
    assert rng.i8() == -1
    assert rng.i32() == -1
    assert rng.i64() == -1


def test_floats_cover_both_ends():
    assert Random(_seq(0)).f64() == 0.0
    assert Random(_seq(U32_MAX)).f64() == 1.0
    assert Random(_seq(0)).f32() == 0.0
    assert Random(_seq(U32_MAX)).f32() == 1.0


def test_floats_stay_in_unit_interval():
    rng = _seeded(7)
    for _ in range(500):
        assert 0.0 <= rng.f64() <= 1.0
        assert 0.0 <= rng.f32() <= 1.0


def test_within_range_empty_or_inverted_returns_start():
    rng = Random(_seq(U32_MAX))
    assert rng.within_range(5, 5) == 5
    assert rng.within_range(9, 3) == 9


def test_within_range_stays_inside_half_open_range():
    rng = _seeded(3)
    seen = {rng.within_range(10, 15) for _ in range(500)}
    assert seen <= set(range(10, 15))
    assert len(seen) == 5


def test_within_range_unbounded_stop():
    rng = Random(_seq(U32_MAX))
    assert rng.within_range(0) == U32_MAX


def test_between_rejects_inverted_int_bounds():
    with pytest.raises(ValueError):
        Random(_seq(0)).between(5, 4)


def test_between_rejects_out_of_domain_bounds():
    with pytest.raises(ValueError):
        Random(_seq(0)).between(-1, U64_MAX)
    with pytest.raises(ValueError):
        Random(_seq(0)).between(0, U64_MAX + 1)


def test_between_rejects_non_numbers():
    with pytest.raises(TypeError):
        Random(_seq(0)).between("a", "b")


def test_between_equal_bounds_returns_bound():
    assert Random(_seq(U32_MAX)).between(42, 42) == 42


def test_between_rejection_skips_biased_draw():
    rng = Random(_seq(U32_MAX, U32_MAX, 0, 0))
    assert rng.between(10, 12) == 10


def test_between_full_unsigned_domain_uses_raw_u64():
    rng = Random(_seq(1, 2))
    assert rng.between(0, U64_MAX) == (2 << 32) | 1


def test_between_full_signed_domain_uses_i64():
    rng = Random(_seq(U32_MAX))
    assert rng.between(I64_MIN, I64_MAX) == -1


def test_between_ints_stay_in_closed_range():
    rng = _seeded(11)
    seen = {rng.between(-3, 3) for _ in range(1000)}
    assert seen == set(range(-3, 4))


def test_between_floats_hit_endpoints():
    assert Random(_seq(0)).between(1.5, 3.5) == 1.5
    assert Random(_seq(U32_MAX)).between(1.5, 3.5) == 3.5


def test_between_floats_stay_in_range():
    rng = _seeded(5)
    for _ in range(200):
        assert -2.0 <= rng.between(-2.0, 2.0) <= 2.0


def test_bool_follows_low_bit():
    assert Random(_seq(1)).bool() is True
    assert Random(_seq(2)).bool() is False


def test_shuffle_is_permutation():
    rng = _seeded(9)
    items = list(range(20))
    rng.shuffle(items)
    assert sorted(items) == list(range(20))


def test_shuffle_small_sequences_unchanged():
    rng = _seeded(9)
    empty = []
    single = ["x"]
    rng.shuffle(empty)
    rng.shuffle(single)
    assert empty == []
    assert single == ["x"]


def test_pick_empty_returns_none():
    assert Random(_seq(0)).pick([]) is None


def test_pick_uses_index_from_source():
    assert Random(_seq(1)).pick(["a", "b", "c"]) == "b"


def test_default_source_produces_u32():
    value = Random().u32()
    assert 0 <= value <= U32_MAX