import numbers


class UnionFind:
    """
    Disjoint set union over the elements 0..n-1 with path compression.

    Merging is by rank by default. ``union_sets(u, v, by_rank=False)`` links
    roots without balancing, and ``union_by_size`` balances on a size list
    owned by the caller, so every policy can run on the same parent array.
    """
    def __init__(self, n):
        """Initialize with n singleton sets"""
        if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 0:
            raise ValueError(f"n must be a non-negative integer, got {n!r}")
        self.parent = list(range(n))
        self.rank = [0] * n

    def __len__(self):
        return len(self.parent)

    def _check(self, x):
        if isinstance(x, bool) or not isinstance(x, numbers.Integral):
            raise IndexError(f"element must be an int, got {x!r}")
        if not 0 <= x < len(self.parent):
            raise IndexError(f"element {x} out of range for {len(self.parent)} elements")

    def find(self, x):
        """Find the root/representative of element x with path compression"""
        self._check(x)
        x = int(x)
        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union_sets(self, x, y, by_rank=True):
        """
        Union the sets containing x and y.

        Args:
            x, y: elements to merge
            by_rank: attach the lower-rank root under the higher-rank one.
                On a tie the root of x survives and its rank grows by one.
                When False the root of y always goes under the root of x.
        """
        self._check(y)
        xroot = self.find(x)
        yroot = self.find(y)

        if xroot == yroot:
            return

        if not by_rank:
            self.parent[yroot] = xroot
        elif self.rank[xroot] < self.rank[yroot]:
            self.parent[xroot] = yroot
        elif self.rank[xroot] > self.rank[yroot]:
            self.parent[yroot] = xroot
        else:
            self.parent[yroot] = xroot
            self.rank[xroot] += 1

    def union_by_size(self, x, y, size):
        """
        Union the sets containing x and y using the caller's size list.

        The smaller tree goes under the larger and its size is added to the
        survivor. On equal sizes the root of x goes under the root of y,
        the opposite of the rank tie-break in ``union_sets``.

        Args:
            x, y: elements to merge
            size: mutable sequence of length n, all 1s before the first merge
        """
        if len(size) != len(self.parent):
            raise ValueError(f"size has {len(size)} entries, expected {len(self.parent)}")
        self._check(y)
        xroot = self.find(x)
        yroot = self.find(y)

        if xroot == yroot:
            return

        if size[xroot] > size[yroot]:
            self.parent[yroot] = xroot
            size[xroot] += size[yroot]
        else:
            self.parent[xroot] = yroot
            size[yroot] += size[xroot]

    def connected(self, x, y):
        """Check whether x and y are in the same set"""
        self._check(y)
        return self.find(x) == self.find(y)

    @property
    def num_sets(self):
        """Number of disjoint sets"""
        return sum(1 for i, p in enumerate(self.parent) if i == p)

    def get_elements_in_set(self, x):
        """Get all elements in the same set as x"""
        xroot = self.find(x)
        return [i for i in range(len(self.parent)) if self.find(i) == xroot]
