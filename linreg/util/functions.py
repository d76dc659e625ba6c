import numpy as np
from numba import njit


def naive_shuffle(order: np.ndarray, rng: np.random.Generator) -> np.ndarray:
    """
    Shuffle `order` in place by swapping every position with a random one.

    Each position ``i`` is swapped with an index drawn from the whole array
    rather than from the unvisited suffix, so this is not a Fisher-Yates
    shuffle and its permutations are not exactly uniform. It does always
    leave `order` a permutation of its previous contents.
    """
    size = order.shape[0]
    if size == 0:
        return order
    _swap_in_place(order, rng.integers(0, size, size=size))
    return order


@njit(cache=True, nogil=True)
def _swap_in_place(order: np.ndarray, picks: np.ndarray) -> None:
    for i in range(order.shape[0]):
        r = picks[i]
        tmp = order[i]
        order[i] = order[r]
        order[r] = tmp
