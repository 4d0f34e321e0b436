from unionfind_lab.strategies.base import MergeStrategy


class SizeStrategy(MergeStrategy):
    """Union by size, keeping the size list outside the UnionFind"""

    name = "size"

    def setup(self, uf):
        self.size = [1] * len(uf)

    def merge(self, uf, u, v):
        uf.union_by_size(u, v, self.size)
