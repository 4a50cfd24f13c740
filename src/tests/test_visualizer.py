import matplotlib.pyplot as plt
import numpy as np
import pytest
from matplotlib.backend_bases import KeyEvent

from antcolony.config import ACOParams
from antcolony.engine import Simulation
from antcolony.pheromone_heatmap import best_length_plot, pheromone_heatmap
from antcolony.visualizer import (
    animate,
    ant_colors,
    draw_simulation,
    info_text,
    pheromone_edge_style,
)


@pytest.fixture
def sim():
    return Simulation(6, 3, params=ACOParams(), seed=8)


def test_ant_colors_are_bright_enough():
    colors = ant_colors(50, np.random.default_rng(0))
    assert colors.shape == (50, 4)
    assert np.all(colors[:, :3] >= 50 / 255)
    assert np.all(colors <= 1.0)


def test_edge_style_scales_with_pheromone():
    low_color, low_width = pheromone_edge_style(0.0, 1.0)
    high_color, high_width = pheromone_edge_style(1.0, 1.0)
    assert low_width == 1.0 and high_width == 5.0
    assert high_color[0] > low_color[0]
    assert high_color[2] < low_color[2]


def test_info_text_before_and_after_solution(sim):
    assert "Best length: -" in info_text(sim)
    sim.run(generations=1)
    assert f"{sim.best_length:.3f}" in info_text(sim)
    assert "Iteration: 1" in info_text(sim)


def test_draw_simulation_mid_generation(sim):
    sim.run(generations=1)
    sim.step()
    fig, ax = plt.subplots()
    draw_simulation(sim, ax)
    assert ax.get_title(loc="left").startswith("Iteration: 1")
    assert len(ax.lines) == len(sim.ants) + 1  # trails plus best tour
    plt.close(fig)


def test_animate_builds_a_figure(sim):
    fig, ani = animate(sim, interval=10, frames=3)
    assert ani is not None
    plt.close(fig)


def test_heatmap_and_history_plots(sim):
    sim.run(generations=4)
    fig, (ax1, ax2) = plt.subplots(1, 2)
    im = pheromone_heatmap(sim.pheromones.matrix, ax=ax1)
    assert im.get_array().shape == (6, 6)
    line = best_length_plot(sim.best_length_history, ax=ax2)
    assert len(line.get_xdata()) == 4
    plt.close(fig)


def test_heatmap_rejects_non_square():
    with pytest.raises(ValueError):
        pheromone_heatmap(np.zeros((2, 3)))


def press(fig, key):
    fig.canvas.callbacks.process("key_press_event", KeyEvent("key_press_event", fig.canvas, key))


class TestAnimationKeys:
    def test_ant_count_keys(self):
        sim = Simulation(6, 3, params=ACOParams(), seed=1)
        fig, ani = animate(sim, frames=1, max_ants=4)
        press(fig, "+")
        assert sim.ant_count == 4
        press(fig, "+")
        assert sim.ant_count == 4
        for _ in range(5):
            press(fig, "-")
        assert sim.ant_count == 1
        assert len(sim.ants) == 1
        plt.close(fig)

    def test_node_count_keys_rebuild_the_graph(self):
        sim = Simulation(5, 3, params=ACOParams(), seed=1)
        sim.run(generations=2)
        fig, ani = animate(sim, frames=1, node_range=(4, 6))
        press(fig, "]")
        assert sim.node_count == 6
        assert sim.iteration == 0
        assert not sim.has_solution
        press(fig, "]")
        assert sim.node_count == 6
        for _ in range(4):
            press(fig, "[")
        assert sim.node_count == 4
        assert len(sim.ants) == 3
        plt.close(fig)

    def test_limit_key_keeps_progress(self):
        sim = Simulation(4, 2, params=ACOParams(), seed=1)
        sim.run(generations=1)
        fig, ani = animate(sim, frames=1, node_range=(4, 40))
        press(fig, "[")
        assert sim.iteration == 1
        plt.close(fig)

    def test_pause_and_single_step(self):
        sim = Simulation(6, 2, params=ACOParams(), seed=1)
        fig, ani = animate(sim, frames=1)
        press(fig, " ")
        press(fig, "n")
        assert all(ant.tour_size == 2 for ant in sim.ants)
        press(fig, "r")
        assert all(ant.tour_size == 1 for ant in sim.ants)
        plt.close(fig)

    def test_colors_grow_with_ant_count(self):
        sim = Simulation(6, 1, params=ACOParams(), seed=1)
        fig, ani = animate(sim, frames=1, colors=ant_colors(1))
        press(fig, "+")
        press(fig, "+")
        assert len(sim.ants) == 3
        # nodes and ant markers were redrawn for all three ants
        assert len(fig.axes[0].collections) >= 2
        plt.close(fig)
