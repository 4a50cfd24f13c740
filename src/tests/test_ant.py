import numpy as np
import pytest

from antcolony.ant import Ant
from antcolony.geometry import generate
from antcolony.pheromones import init_matrix


@pytest.fixture
def graph():
    _, dist = generate(6, np.random.default_rng(11))
    return init_matrix(6, 0.1), dist


def test_start_node_is_round_robin():
    assert [Ant(k, 4).start_node for k in range(6)] == [0, 1, 2, 3, 0, 1]


def test_new_ant_holds_its_start_node():
    ant = Ant(2, 5)
    assert ant.tour == [2]
    assert ant.current_node == 2
    assert ant.visited.sum() == 1 and ant.visited[2]
    assert ant.tour_length == 0.0
    assert ant.is_running


def test_one_hop_per_advance(graph, params):
    pher, dist = graph
    ant = Ant(0, 6)
    rng = np.random.default_rng(0)
    ant.advance(pher, dist, params, rng)
    assert ant.tour_size == 2
    assert ant.tour_length == pytest.approx(dist[ant.tour[0], ant.tour[1]])
    assert ant.current_node == ant.tour[-1]


def test_finished_ant_holds_a_permutation(graph, params):
    pher, dist = graph
    ant = Ant(3, 6)
    rng = np.random.default_rng(1)
    for _ in range(5):
        assert ant.is_running
        ant.advance(pher, dist, params, rng)

    assert ant.finished
    assert ant.is_complete
    assert sorted(ant.tour) == list(range(6))
    hops = sum(dist[a, b] for a, b in zip(ant.tour, ant.tour[1:]))
    assert ant.tour_length == pytest.approx(hops)


def test_advance_after_finish_is_a_no_op(graph, params):
    pher, dist = graph
    ant = Ant(0, 6)
    rng = np.random.default_rng(2)
    for _ in range(5):
        ant.advance(pher, dist, params, rng)
    tour, length = ant.tour, ant.tour_length
    ant.advance(pher, dist, params, rng)
    assert ant.tour == tour
    assert ant.tour_length == length


def test_single_node_ant_finishes_without_moving(params):
    ant = Ant(0, 1)
    ant.advance(np.zeros((1, 1)), np.zeros((1, 1)), params, np.random.default_rng(0))
    assert ant.finished
    assert ant.tour == [0]
    assert ant.tour_length == 0.0
