import numpy as np

from antcolony.transition import select_next_node


class Ant:
    def __init__(self, ant_id, num_nodes):
        self.ant_id = ant_id
        self.num_nodes = num_nodes
        self.start_node = ant_id % num_nodes  # round-robin over the nodes
        self.current_node = self.start_node
        # tabu set and path are sized once per generation
        self.visited = np.zeros(num_nodes, dtype=bool)
        self.path = np.full(num_nodes, -1, dtype=int)
        self.tour_size = 0
        self.tour_length = 0.0
        self.finished = False

        self.visited[self.start_node] = True
        self.path[0] = self.start_node
        self.tour_size = 1

    @property
    def tour(self):
        return [int(n) for n in self.path[:self.tour_size]]

    @property
    def is_running(self):
        return not self.finished

    @property
    def is_complete(self):
        return self.tour_size == self.num_nodes

    def unvisited(self):
        return np.flatnonzero(~self.visited)

    def advance(self, pheromone_matrix, distances, params, rng):
        """Move one hop, or flip to finished when there is nowhere left to go."""
        if self.finished:
            return
        if self.tour_size >= self.num_nodes:
            self.finished = True
            return

        allowed = self.unvisited()
        if len(allowed) == 0:
            self.finished = True
            return

        next_node = select_next_node(
            self.current_node, allowed, pheromone_matrix, distances,
            params.alpha, params.beta, rng,
        )

        self.tour_length += float(distances[self.current_node, next_node])
        self.current_node = next_node
        self.visited[next_node] = True
        self.path[self.tour_size] = next_node
        self.tour_size += 1

        if self.tour_size >= self.num_nodes:
            self.finished = True

    def __repr__(self):
        state = "finished" if self.finished else "running"
        return f"Ant({self.ant_id}, at={self.current_node}, size={self.tour_size}, {state})"
