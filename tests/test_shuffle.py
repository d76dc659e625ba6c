import numpy as np
import pytest

from linreg.util.functions import naive_shuffle


@pytest.mark.parametrize("size", [0, 1, 2, 3, 5, 8, 13, 64])
def test_shuffle_keeps_permutation(size, rng):
    order = np.arange(size, dtype=np.intp)

    for _ in range(25):
        naive_shuffle(order, rng)
        assert sorted(order.tolist()) == list(range(size))


def test_shuffle_is_in_place(rng):
    order = np.arange(10, dtype=np.intp)

    result = naive_shuffle(order, rng)

    assert result is order


def test_shuffle_reorders(rng):
    order = np.arange(10, dtype=np.intp)

    seen = set()
    for _ in range(5):
        naive_shuffle(order, rng)
        seen.add(tuple(order.tolist()))

    assert seen != {tuple(range(10))}


def test_shuffle_repeatable_with_seed():
    first = naive_shuffle(np.arange(20, dtype=np.intp), np.random.default_rng(99))
    second = naive_shuffle(np.arange(20, dtype=np.intp), np.random.default_rng(99))

    np.testing.assert_array_equal(first, second)
