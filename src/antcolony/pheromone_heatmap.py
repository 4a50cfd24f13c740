import numpy as np
import matplotlib.pyplot as plt


def pheromone_heatmap(pheromone_matrix, ax=None, cmap='coolwarm', save_path=None):
    """
    Static heatmap of one pheromone matrix.
    """
    matrix = np.asarray(pheromone_matrix, dtype=float)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError("Pheromone matrix must be square.")

    own_fig = ax is None
    if own_fig:
        fig, ax = plt.subplots(figsize=(5, 4))
    else:
        fig = ax.figure
    im = ax.imshow(matrix, cmap=cmap, interpolation='nearest', vmin=0.0)
    ax.set_title("Pheromone Matrix")
    ax.set_xticks([]); ax.set_yticks([])
    fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04)

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')
        if own_fig:
            plt.close(fig)
    return im


def best_length_plot(history, ax=None, save_path=None):
    """
    Best tour length after each generation.
    """
    own_fig = ax is None
    if own_fig:
        fig, ax = plt.subplots(figsize=(5, 3))
    else:
        fig = ax.figure
    values = [v if np.isfinite(v) else np.nan for v in history]
    line, = ax.plot(range(1, len(values) + 1), values, color='red')
    ax.set_title("Best Tour Length Over Time")
    ax.set_xlabel("Iteration")
    ax.set_ylabel("Best Length")
    ax.grid(True, alpha=0.3)

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')
        if own_fig:
            plt.close(fig)
    return line
