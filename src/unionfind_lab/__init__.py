from unionfind_lab.utils.union_find import UnionFind

__version__ = "0.1.0"
