import numpy as np


def init_matrix(num_nodes, tau0):
    matrix = np.full((num_nodes, num_nodes), float(tau0))
    np.fill_diagonal(matrix, 0.0)
    return matrix


def deposit_contributions(tours, tour_lengths, q, num_nodes):
    """
    Sum of q / L_k over every ant k whose tour uses edge (i, j), in both directions.
    Tours with fewer than two nodes or a non-positive length lay nothing.
    """
    delta = np.zeros((num_nodes, num_nodes))
    for tour, length in zip(tours, tour_lengths):
        if len(tour) < 2 or not np.isfinite(length) or length <= 0:
            continue
        amount = q / length
        tour_arr = np.asarray(tour, dtype=int)
        edges_a = tour_arr[:-1]
        edges_b = tour_arr[1:]
        np.add.at(delta, (edges_a, edges_b), amount)
        np.add.at(delta, (edges_b, edges_a), amount)  # symmetric
    return delta


def evaporate_and_deposit(old, contributions, rho):
    """new = rho * old + contributions, built from a read-only snapshot of `old`."""
    snapshot = np.array(old, dtype=float, copy=True)
    snapshot.setflags(write=False)
    new = rho * snapshot + contributions
    np.fill_diagonal(new, 0.0)
    return new


class PheromoneMatrix:
    def __init__(self, num_nodes, rho, q, tau0):
        self.num_nodes = num_nodes
        self.rho = rho  # retention fraction
        self.q = q
        self.tau0 = tau0
        self.matrix = init_matrix(num_nodes, tau0)

    def update(self, tours, tour_lengths):
        delta = deposit_contributions(tours, tour_lengths, self.q, self.num_nodes)
        self.matrix = evaporate_and_deposit(self.matrix, delta, self.rho)

    def level(self, i, j):
        return float(self.matrix[i, j])

    def max_value(self):
        if self.num_nodes < 2:
            return 0.0
        upper = self.matrix[np.triu_indices(self.num_nodes, k=1)]
        return float(max(upper.max(), 0.0))

    def reset(self):
        self.matrix = init_matrix(self.num_nodes, self.tau0)
