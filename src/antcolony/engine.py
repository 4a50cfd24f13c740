import logging
import numpy as np
from dataclasses import dataclass

from antcolony.ant import Ant
from antcolony.config import ACOParams
from antcolony.errors import InvalidConfiguration
from antcolony.geometry import Node, distance_matrix, generate
from antcolony.pheromones import PheromoneMatrix

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    best_tour: list
    best_length: float
    iterations: int


def _check_node_count(node_count):
    if isinstance(node_count, bool) or not isinstance(node_count, (int, np.integer)):
        raise InvalidConfiguration(f"node count must be an integer, got {node_count!r}")
    if node_count < 1:
        raise InvalidConfiguration(f"node count must be >= 1, got {node_count}")
    return int(node_count)


class Simulation:
    """
    Step-driven Ant System on a random complete graph in the unit square.

    Every call to step() moves each running ant one hop. When the whole
    generation has finished, pheromone is evaporated and deposited, the best
    tour is updated, and a fresh generation is spawned.

    Not thread-safe: callers must serialise step(), reset() and the setters.
    """

    def __init__(self, node_count, ant_count, params=None, seed=None, positions=None):
        self.params = params or ACOParams.from_config()
        self.rng = np.random.default_rng(seed)
        self.ant_count = max(1, int(ant_count))
        node_count = _check_node_count(node_count)
        nodes = None
        if positions is not None:
            nodes = [Node(float(x), float(y)) for x, y in positions]
            if len(nodes) != node_count:
                raise InvalidConfiguration(
                    f"got {len(nodes)} positions for a {node_count}-node graph"
                )
        self._build(node_count, nodes=nodes)

    @classmethod
    def from_positions(cls, positions, ant_count, params=None, seed=None):
        """Simulation on fixed node positions; reset() still draws a random layout."""
        positions = list(positions)
        return cls(len(positions), ant_count, params=params, seed=seed, positions=positions)

    def _build(self, node_count, nodes=None):
        self.num_nodes = node_count
        if nodes is None:
            self._nodes, self.distances = generate(node_count, self.rng)
        else:
            self._nodes, self.distances = list(nodes), distance_matrix(nodes)
        self.pheromones = PheromoneMatrix(
            node_count, self.params.rho, self.params.q, self.params.tau0
        )
        self.iteration = 0
        self.best_tour = None
        self.best_length = float("inf")
        self.best_length_history = []
        self._spawn_ants()

    def _spawn_ants(self):
        self.ants = [Ant(k, self.num_nodes) for k in range(self.ant_count)]

    # ---------- commands ----------

    def step(self):
        """Advance one tick. Returns True if a generation completed during this call."""
        if all(ant.finished for ant in self.ants):
            self._complete_generation()
            return True

        for ant in self.ants:
            if ant.is_running:
                ant.advance(self.pheromones.matrix, self.distances, self.params, self.rng)

        if all(ant.finished for ant in self.ants):
            self._complete_generation()
            return True
        return False

    def run(self, generations=1):
        target = self.iteration + generations
        while self.iteration < target:
            self.step()
        return RunResult(
            best_tour=self.get_best_tour(),
            best_length=self.best_length,
            iterations=self.iteration,
        )

    def reset(self):
        self._build(self.num_nodes)
        logger.debug("Simulation reset: %d nodes, %d ants", self.num_nodes, self.ant_count)

    def reconfigure(self, node_count):
        """Throw away all state and start over on a new random graph of `node_count` nodes."""
        self._build(_check_node_count(node_count))
        logger.debug("Simulation reconfigured: %d nodes, %d ants", self.num_nodes, self.ant_count)

    def set_ant_count(self, ant_count):
        self.ant_count = max(1, int(ant_count))
        # in-flight ants are dropped without laying pheromone
        self._spawn_ants()

    def _complete_generation(self):
        tours = [ant.tour for ant in self.ants]
        lengths = [ant.tour_length for ant in self.ants]
        self.pheromones.update(tours, lengths)

        for ant in self.ants:
            if ant.tour_size < 2:
                continue
            if ant.tour_length < self.best_length:
                self.best_length = ant.tour_length
                self.best_tour = ant.tour
                logger.info(
                    "Iteration %d: new best length %.3f (ant %d)",
                    self.iteration + 1, self.best_length, ant.ant_id,
                )

        self._spawn_ants()
        self.iteration += 1
        self.best_length_history.append(self.best_length)
        logger.debug("Iteration %d: Best length %.3f", self.iteration, self.best_length)

    # ---------- queries ----------

    @property
    def node_count(self):
        return self.num_nodes

    @property
    def nodes(self):
        return list(self._nodes)

    @property
    def has_solution(self):
        return self.best_tour is not None

    def node(self, i):
        return self._nodes[i]

    def distance(self, i, j):
        return float(self.distances[i, j])

    def pheromone(self, i, j):
        return self.pheromones.level(i, j)

    def max_pheromone(self):
        return self.pheromones.max_value()

    def get_best_tour(self):
        return list(self.best_tour) if self.best_tour is not None else None
