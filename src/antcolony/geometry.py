import numpy as np
from dataclasses import dataclass

# Nodes are kept away from the edges of the unit square
COORD_LOW = 0.1
COORD_HIGH = 0.9


@dataclass(frozen=True)
class Node:
    x: float
    y: float


def generate_nodes(node_count, rng):
    nodes = []
    for _ in range(node_count):
        x = COORD_LOW + (COORD_HIGH - COORD_LOW) * rng.random()
        y = COORD_LOW + (COORD_HIGH - COORD_LOW) * rng.random()
        nodes.append(Node(float(x), float(y)))
    return nodes


def distance_matrix(nodes):
    """Symmetric Euclidean distances between all node pairs, zero on the diagonal."""
    coords = np.array([(n.x, n.y) for n in nodes], dtype=float).reshape(-1, 2)
    diff = coords[:, None, :] - coords[None, :, :]
    dist = np.sqrt((diff ** 2).sum(axis=-1))
    # diff is antisymmetric, so dist is exactly symmetric; pin the diagonal anyway
    np.fill_diagonal(dist, 0.0)
    dist.setflags(write=False)
    return dist


def generate(node_count, rng):
    nodes = generate_nodes(node_count, rng)
    return nodes, distance_matrix(nodes)
