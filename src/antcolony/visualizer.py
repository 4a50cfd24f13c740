# ----------------- visualizer.py -----------------
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from matplotlib.collections import LineCollection

# Edges with less pheromone than this are not drawn
DRAW_THRESHOLD = 1e-5
BEST_TOUR_COLOR = (0.0, 200 / 255, 0.0)


def ant_colors(count, rng=None):
    """Random, not-too-dark RGBA colour per ant id (channels in 50..255)."""
    rng = rng if rng is not None else np.random.default_rng()
    rgb = rng.integers(50, 256, size=(count, 3)) / 255.0
    alpha = np.full((count, 1), 220 / 255)
    return np.hstack([rgb, alpha])


def pheromone_edge_style(tau, max_tau):
    """Colour runs from bluish (little pheromone) to red; width grows with the ratio."""
    ratio = min(max(tau / max_tau, 0.0), 1.0) if max_tau > 0 else 0.0
    color = ((50 + 205 * ratio) / 255, 60 / 255, (230 - 200 * ratio) / 255, 180 / 255)
    width = 1.0 + 4.0 * ratio
    return color, width


def info_text(sim):
    best = "-" if not sim.has_solution else f"{sim.best_length:.3f}"
    p = sim.params
    return (f"Iteration: {sim.iteration}   Best length: {best}   "
            f"(α={p.alpha}, β={p.beta}, ρ={p.rho})")


def draw_simulation(sim, ax, colors=None, show_labels=True):
    """
    Draws one frame: pheromone-weighted edges with d / tau labels, the partial
    tour of every ant, nodes, ant positions, and the best tour on top.
    Only uses the simulation's read-only queries.
    """
    ax.clear()
    n = sim.node_count
    xs = np.array([sim.node(i).x for i in range(n)])
    ys = np.array([sim.node(i).y for i in range(n)])
    if colors is None or len(colors) < len(sim.ants):
        colors = ant_colors(len(sim.ants))

    # ---------- Pheromone edges ----------
    max_tau = sim.max_pheromone()
    segments, edge_colors, widths = [], [], []
    if max_tau > 0.0:
        for i in range(n):
            for j in range(i + 1, n):
                tau = sim.pheromone(i, j)
                if tau <= DRAW_THRESHOLD:
                    continue
                color, width = pheromone_edge_style(tau, max_tau)
                segments.append([(xs[i], ys[i]), (xs[j], ys[j])])
                edge_colors.append(color)
                widths.append(width)
                if show_labels:
                    ax.text((xs[i] + xs[j]) / 2, (ys[i] + ys[j]) / 2,
                            f"{sim.distance(i, j):.2f} / {tau:.2f}",
                            fontsize=6, color=(0, 0, 0, 170 / 255))
    if segments:
        ax.add_collection(LineCollection(segments, colors=edge_colors, linewidths=widths))

    # ---------- Ant trails ----------
    for ant in sim.ants:
        tour = ant.tour
        if len(tour) <= 1:
            continue
        ax.plot(xs[tour], ys[tour], color=colors[ant.ant_id], linewidth=1.5)

    # ---------- Nodes and ants ----------
    ax.scatter(xs, ys, s=120, facecolors="white", edgecolors="black", linewidths=1.2, zorder=3)
    ant_nodes = [ant.current_node for ant in sim.ants]
    ax.scatter(xs[ant_nodes], ys[ant_nodes], s=30,
               c=[colors[ant.ant_id] for ant in sim.ants],
               edgecolors="black", linewidths=1.0, zorder=4)

    # ---------- Best tour ----------
    best = sim.get_best_tour()
    if best is not None:
        ax.plot(xs[best], ys[best], color=BEST_TOUR_COLOR, linewidth=4.0, zorder=5,
                label="best tour")

    ax.set_title(info_text(sim), fontsize=9, loc="left")
    ax.set_xlim(0, 1)
    ax.set_ylim(1, 0)  # screen coordinates: y grows downwards
    ax.set_xticks([])
    ax.set_yticks([])
    return ax


def animate(sim, interval=120, colors=None, show_labels=True, frames=None,
            node_range=(4, 40), max_ants=200):
    """
    Timer-driven animation: each frame calls sim.step() once and redraws.

    Keys: space pauses/resumes, 'n' single-steps while paused, 'r' resets,
    '+' / '-' change the ant count (1..max_ants), ']' / '[' change the node
    count within node_range. A node change starts a new graph.
    """
    fig, ax = plt.subplots(figsize=(9, 6.5))
    state = {"running": True,
             "colors": colors if colors is not None else ant_colors(max(sim.ant_count, 1))}
    min_nodes, max_nodes = node_range

    def redraw():
        if len(state["colors"]) < sim.ant_count:
            state["colors"] = ant_colors(sim.ant_count)
        draw_simulation(sim, ax, colors=state["colors"], show_labels=show_labels)

    def update(_frame):
        if state["running"]:
            sim.step()
        redraw()
        return []

    def on_key(event):
        if event.key == " ":
            state["running"] = not state["running"]
            return
        if event.key == "n" and not state["running"]:
            sim.step()
        elif event.key == "r":
            sim.reset()
        elif event.key in ("+", "=", "-"):
            step = -1 if event.key == "-" else 1
            ants = min(max(sim.ant_count + step, 1), max_ants)
            if ants == sim.ant_count:
                return
            sim.set_ant_count(ants)
        elif event.key in ("[", "]"):
            step = 1 if event.key == "]" else -1
            nodes = min(max(sim.node_count + step, min_nodes), max_nodes)
            if nodes == sim.node_count:
                return
            sim.reconfigure(nodes)
        else:
            return
        redraw()
        fig.canvas.draw_idle()

    fig.canvas.mpl_connect("key_press_event", on_key)
    ani = FuncAnimation(fig, update, frames=frames, interval=interval, blit=False,
                        repeat=False, cache_frame_data=False)
    return fig, ani
