import logging
import random

import numpy as np

from segtree.segment_tree import LazySegmentTree
from segtree.utils import brute_force_add, brute_force_sum

logger = logging.getLogger(__name__)


def run_sample() -> list:
    print("Running Segment Tree Sample...")
    data = np.arange(1, 9)
    n = len(data)
    st = LazySegmentTree(data)
    sums = []

    def report(label: str, l: int, r: int):
        s = st.query_range(l, r)
        sums.append(s)
        print(f"{label} [{l}, {r}]: {s}")

    report("Initial sum", 0, n - 1)
    report("Sum", 2, 5)

    print("\nUpdate: Add 10 to range [1, 4]")
    st.update_range(1, 4, 10)
    report("Sum after update", 0, n - 1)
    report("Sum after update", 2, 5)
    report("Sum after update", 0, 1)
    report("Sum after update", 4, 6)

    print("\nUpdate: Add -5 to range [3, 6]")
    st.update_range(3, 6, -5)
    report("Sum after update", 0, n - 1)
    report("Sum after update", 2, 5)
    return sums


def run_random_check(args: dict) -> int:
    """
    Random updates and queries on a tree and on a plain numpy array side by side.
    Range ends are drawn from [-1, size] so invalid ranges show up too.
    Returns the number of queries compared.
    """
    random.seed(args["seed"])
    np.random.seed(args["seed"])

    size = args["size"]
    data = np.random.randint(-args["max_value"], args["max_value"] + 1, size=size).astype(np.int64)
    st = LazySegmentTree(data)
    mirror = data.copy()

    n_queries = 0
    for step in range(args["n_ops"]):
        l, r = random.randint(-1, size), random.randint(-1, size)
        if random.random() < 0.5:
            delta = random.randint(-args["max_delta"], args["max_delta"])
            st.update_range(l, r, delta)
            brute_force_add(mirror, l, r, delta)
        else:
            expected = brute_force_sum(mirror, l, r)
            got = st.query_range(l, r)
            assert got == expected, f"step {step}: sum [{l}, {r}] expected {expected} but got {got}"
            n_queries += 1

    assert st.values() == mirror.tolist(), "final values differ from the reference array"
    logger.info("random check passed: %d ops, %d queries, size %d", args["n_ops"], n_queries, size)
    return n_queries


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    args = {
        "seed": 1993,
        "size": 1000,
        "n_ops": 5000,
        "max_value": 1000,
        "max_delta": 100,
    }

    run_sample()
    run_random_check(args)
