import numpy as np


class InvalidRangeError(IndexError):
    """Raised by strict trees when a range falls outside ``[0, n)`` or is reversed."""


def tree_capacity(n: int) -> int:
    # 4n nodes bound the implicit layout for any n, not only powers of 2
    return 4 * n


def is_valid_range(n: int, l: int, r: int) -> bool:
    return n > 0 and 0 <= l <= r < n


def check_range(n: int, l: int, r: int):
    if not is_valid_range(n, l, r):
        raise InvalidRangeError(f"invalid range [{l}, {r}] for array of size {n}")


def brute_force_add(data: np.ndarray, l: int, r: int, delta: int):
    """
    Reference range update: add `delta` to data[l..r] in place, element by element.
    Invalid ranges are ignored, the same way the tree ignores them.
    """
    if not is_valid_range(len(data), l, r):
        return
    data[l:r + 1] += delta


def brute_force_sum(data: np.ndarray, l: int, r: int) -> int:
    # reference range query, 0 on invalid range
    if not is_valid_range(len(data), l, r):
        return 0
    return int(data[l:r + 1].sum())
