import numpy as np


def node_depths(parent):
    """
    Depth of every element in the forest described by a parent list

    Args:
        parent: sequence where parent[i] is the parent of i and roots point
            to themselves. It is only read, so no path gets compressed.

    Returns:
        Integer array with 0 for roots and the number of links to the root
        otherwise
    """
    n = len(parent)
    depths = np.full(n, -1, dtype=np.int64)

    for i in range(n):
        # walk up until we hit a root or a node whose depth is known
        path = []
        node = i
        while depths[node] < 0 and parent[node] != node:
            path.append(node)
            node = parent[node]
        if depths[node] < 0:
            depths[node] = 0

        depth = depths[node]
        for visited in reversed(path):
            depth += 1
            depths[visited] = depth

    return depths


def depth_stats(parent):
    """Summary statistics of the forest shape, as plain python numbers"""
    depths = node_depths(parent)
    num_sets = sum(1 for i, p in enumerate(parent) if i == p)
    if len(depths) == 0:
        return {
            "num_sets": 0,
            "max_depth": 0,
            "mean_depth": 0.0,
            "p50": 0.0,
            "p90": 0.0,
            "p99": 0.0,
        }

    return {
        "num_sets": num_sets,
        "max_depth": int(np.max(depths)),
        "mean_depth": float(np.mean(depths)),
        "p50": float(np.median(depths)),
        "p90": float(np.percentile(depths, 90)),
        "p99": float(np.percentile(depths, 99)),
    }
