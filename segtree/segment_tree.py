import logging
import numbers

import numpy as np

from segtree.utils import tree_capacity, is_valid_range, check_range

logger = logging.getLogger(__name__)

ROOT = 1


class LazySegmentTree:
    """
    Segment tree over an integer array with lazy propagation.
    Supports adding a constant to every element of [l, r] and summing [l, r], both O(log n).

    The tree lives in two flat arrays indexed by node: root = 1, children of node i are 2i and 2i+1.
    A node's range is never stored, it is recomputed while walking down:
    root covers [0, n-1], left child [l, mid], right child [mid+1, r].

    tree[i] holds the sum of node i's range, already including node i's own pending delta lazy[i].
    lazy[i] is the delta the children of i haven't received yet. Anything pending at an ancestor
    is invisible at i until it has been pushed down, so every path pushes before it looks deeper.

    :param values: 1-d sequence of integers, may be empty
    :param dtype: signed numpy integer dtype of both arrays, overflow is the caller's business
    :param strict: raise InvalidRangeError on bad ranges instead of ignoring them
    """

    def __init__(self, values, dtype=np.int64, strict: bool = False):
        if np.dtype(dtype).kind != "i":
            raise TypeError(f"dtype must be a signed integer type, got {np.dtype(dtype)}")
        data = np.asarray(values)
        if data.ndim != 1:
            raise ValueError(f"values must be 1-dimensional, got shape {data.shape}")
        if data.size and data.dtype.kind not in "iu":
            raise TypeError(f"values must be integers, got {data.dtype}")

        self.n = len(data)
        self.strict = strict
        self.dtype = np.dtype(dtype)
        # empty array: nothing to allocate, every query is 0 and every update a no-op
        if self.n == 0:
            self.tree = np.zeros(0, dtype=self.dtype)
            self.lazy = np.zeros(0, dtype=self.dtype)
            return

        self.tree = np.zeros(tree_capacity(self.n), dtype=self.dtype)
        self.lazy = np.zeros(tree_capacity(self.n), dtype=self.dtype)
        self._init(data, ROOT, 0, self.n - 1)
        logger.debug("built segment tree of size %d, capacity %d", self.n, len(self.tree))

    def __len__(self) -> int:
        return self.n

    def __repr__(self):
        return f"LazySegmentTree(size={self.n})"

    def _init(self, data: np.ndarray, i: int, l: int, r: int):
        # leaves first, a node's sum is known only after both its children are built
        if l == r:
            self.tree[i] = data[l]
            return
        mid = (l + r) // 2
        self._init(data, 2 * i, l, mid)
        self._init(data, 2 * i + 1, mid + 1, r)
        self.tree[i] = self.tree[2 * i] + self.tree[2 * i + 1]

    def _push(self, i: int, l: int, r: int):
        """
        Apply node i's pending delta to its own sum and hand it to its children.
        Children accumulate it, they may already carry a delta from another update.
        """
        if self.lazy[i] == 0:
            return
        self.tree[i] += self.lazy[i] * (r - l + 1)
        if l != r:
            self.lazy[2 * i] += self.lazy[i]
            self.lazy[2 * i + 1] += self.lazy[i]
        self.lazy[i] = 0

    def _update_branch(self, i: int, l: int, r: int, ql: int, qr: int, delta: int):
        # push even when disjoint: the node stays correct and the parent recombines the same sum
        self._push(i, l, r)
        # case 1: (l, r) is outside of (ql, qr), nothing to do
        if l > r or l > qr or r < ql:
            return
        # case 2: (l, r) lies inside (ql, qr), update this node and defer the children
        if ql <= l and r <= qr:
            self.tree[i] += delta * (r - l + 1)
            if l != r:
                self.lazy[2 * i] += delta
                self.lazy[2 * i + 1] += delta
            return
        # case 3: partial overlap, split and recombine
        mid = (l + r) // 2
        self._update_branch(2 * i, l, mid, ql, qr, delta)
        self._update_branch(2 * i + 1, mid + 1, r, ql, qr, delta)
        self.tree[i] = self.tree[2 * i] + self.tree[2 * i + 1]

    def _query_sum(self, i: int, l: int, r: int, ql: int, qr: int):
        # case 1: outside of the query, whatever is pending here doesn't matter
        if l > r or l > qr or r < ql:
            return 0
        self._push(i, l, r)
        # case 2: inside the query
        if ql <= l and r <= qr:
            return self.tree[i]
        # case 3: split the current range into two smaller ranges
        mid = (l + r) // 2
        return self._query_sum(2 * i, l, mid, ql, qr) + self._query_sum(2 * i + 1, mid + 1, r, ql, qr)

    def _collect(self, out: list, i: int, l: int, r: int):
        self._push(i, l, r)
        if l == r:
            out[l] = int(self.tree[i])
            return
        mid = (l + r) // 2
        self._collect(out, 2 * i, l, mid)
        self._collect(out, 2 * i + 1, mid + 1, r)

    def _accept(self, l: int, r: int, op: str) -> bool:
        for bound in (l, r):
            if not isinstance(bound, numbers.Integral) or isinstance(bound, bool):
                raise TypeError(f"range bounds must be integers, got {type(bound).__name__}")
        if is_valid_range(self.n, l, r):
            return True
        if self.strict:
            check_range(self.n, l, r)
        logger.debug("ignoring %s on invalid range [%d, %d], size %d", op, l, r, self.n)
        return False

    def update_range(self, l: int, r: int, delta: int):
        """Add `delta` to every element in [l, r] (inclusive, 0-based)."""
        if not isinstance(delta, numbers.Integral) or isinstance(delta, bool):
            raise TypeError(f"delta must be an integer, got {type(delta).__name__}")
        if not self._accept(l, r, "update"):
            return
        self._update_branch(ROOT, 0, self.n - 1, l, r, int(delta))

    def query_range(self, l: int, r: int) -> int:
        """Return the sum of the elements in [l, r] (inclusive, 0-based), 0 for an invalid range."""
        if not self._accept(l, r, "query"):
            return 0
        return int(self._query_sum(ROOT, 0, self.n - 1, l, r))

    def total(self) -> int:
        if self.n == 0:
            return 0
        return self.query_range(0, self.n - 1)

    def values(self) -> list:
        """
        Current value of every element, O(n).
        Walks the whole tree once and pushes every pending delta down to the leaves.
        """
        out = [0] * self.n
        if self.n:
            self._collect(out, ROOT, 0, self.n - 1)
        return out

    def __getitem__(self, idx: int) -> int:
        if not isinstance(idx, numbers.Integral) or isinstance(idx, bool):
            raise TypeError(f"indices must be integers, got {type(idx).__name__}")
        if idx < 0:
            idx += self.n
        if idx < 0 or idx >= self.n:
            raise IndexError(f"index out of range for array of size {self.n}")
        return int(self._query_sum(ROOT, 0, self.n - 1, idx, idx))


def construct(values, **kwargs) -> LazySegmentTree:
    return LazySegmentTree(values, **kwargs)


def update_range(tree: LazySegmentTree, l: int, r: int, delta: int):
    tree.update_range(l, r, delta)


def query_range(tree: LazySegmentTree, l: int, r: int) -> int:
    return tree.query_range(l, r)
