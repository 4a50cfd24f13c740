import numpy as np

# Coincident nodes would otherwise give an infinite heuristic
DISTANCE_EPSILON = 1e-6


def desirability(current, allowed, pheromone, distances, alpha, beta):
    """tau(r,u)^alpha * (1/d(r,u))^beta for every candidate u, in the order given."""
    allowed = np.asarray(allowed, dtype=int)
    tau = pheromone[current, allowed]
    dist = distances[current, allowed]
    dist = np.where(dist == 0.0, DISTANCE_EPSILON, dist)
    eta = 1.0 / dist
    return (tau ** alpha) * (eta ** beta)


def select_next_node(current, allowed, pheromone, distances, alpha, beta, rng):
    """
    Roulette-wheel choice of the next node among `allowed` (ascending node ids).

    Falls back to a uniform pick when every weight has vanished. A total that
    overflowed to inf (or went nan) takes the same uniform pick, since no
    finite draw can be made against it. If rounding leaves the cumulative sum
    short of the draw, the last candidate wins.
    """
    allowed = np.asarray(allowed, dtype=int)
    weights = desirability(current, allowed, pheromone, distances, alpha, beta)
    total = weights.sum()

    if not np.isfinite(total) or total <= 0:
        return int(allowed[rng.integers(len(allowed))])

    r = rng.random() * total
    cumulative = np.cumsum(weights)
    idx = int(np.searchsorted(cumulative, r, side="left"))
    if idx >= len(allowed):
        idx = len(allowed) - 1
    return int(allowed[idx])
