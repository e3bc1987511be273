import random

import pytest

from tm2c.util import RAND_MAX, XorShift96, pow2roundup, rand_range


class _FixedRng:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.value


def test_xorshift_first_value():
    gen = XorShift96(1, 2, 3)
    assert next(gen) == 202754


def test_xorshift_state_rotates():
    gen = XorShift96(1, 2, 3)
    first = next(gen)
    assert (gen.x, gen.y, gen.z) == (2, 3, first)


def test_xorshift_deterministic_and_iterable():
    a = XorShift96(11, 22, 33)
    b = XorShift96(11, 22, 33)
    seq_a = [next(a) for _ in range(50)]
    seq_b = []
    for value in b:
        seq_b.append(value)
        if len(seq_b) == 50:
            break
    assert seq_a == seq_b


def test_xorshift_values_fit_64_bits():
    gen = XorShift96(2**64 - 1, 2**63, 12345)
    values = [next(gen) for _ in range(200)]
    assert all(0 <= v < 2**64 for v in values)
    assert len(set(values)) > 190


def test_rand_range_bounds():
    rng = random.Random(7)
    values = [rand_range(10, rng) for _ in range(1000)]
    assert min(values) >= 1
    assert max(values) <= 10
    assert set(values) == set(range(1, 11))


def test_rand_range_extremes():
    assert rand_range(10, _FixedRng(0)) == 1
    assert rand_range(10, _FixedRng(RAND_MAX)) == 10


def test_rand_range_wide_range_uses_several_draws():
    rng = _FixedRng(0)
    r = RAND_MAX * 2 + 5
    assert rand_range(r, rng) == 3
    assert len(rng.calls) == 3
    assert all(call == (0, RAND_MAX) for call in rng.calls)


def test_rand_range_wide_range_upper_bound():
    rng = random.Random(3)
    r = RAND_MAX * 3
    assert all(1 <= rand_range(r, rng) <= r for _ in range(100))


@pytest.mark.parametrize("x", [0, 1])
def test_pow2roundup_small(x):
    assert pow2roundup(x) == 1


def test_pow2roundup_exact_powers_unchanged():
    for k in range(32):
        assert pow2roundup(2**k) == 2**k


def test_pow2roundup_is_smallest_power_at_least_x():
    for x in range(2, 5000):
        p = pow2roundup(x)
        assert p & (p - 1) == 0
        assert p >= x
        assert p // 2 < x


def test_pow2roundup_wraps_above_2_31():
    assert pow2roundup(2**31 + 1) == 0


@pytest.mark.parametrize("x", [-1, 2**32])
def test_pow2roundup_rejects_out_of_range(x):
    with pytest.raises(ValueError):
        pow2roundup(x)