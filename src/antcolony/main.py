# ----------------- main.py -----------------
import argparse
import logging

from antcolony.config import (
    ACOParams,
    display_settings,
    load_config,
    merge_config,
    simulation_settings,
)
from antcolony.engine import Simulation
from antcolony.errors import InvalidConfiguration


def build_argparser():
    p = argparse.ArgumentParser(
        prog="antcolony",
        description="Step-by-step Ant Colony Optimization on a random TSP graph.",
    )
    p.add_argument("--config", type=str, default=None, help="YAML file overriding the defaults")
    p.add_argument("--nodes", type=int, default=None, help="Number of nodes")
    p.add_argument("--ants", type=int, default=None, help="Number of ants per generation")
    p.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run")
    p.add_argument("--alpha", type=float, default=None, help="Pheromone weight")
    p.add_argument("--beta", type=float, default=None, help="Distance weight")
    p.add_argument("--rho", type=float, default=None, help="Pheromone retention (0..1)")
    p.add_argument("--q", type=float, default=None, help="Deposit numerator")
    p.add_argument("--tau0", type=float, default=None, help="Initial pheromone")
    p.add_argument("--headless", type=int, metavar="GENERATIONS", default=None,
                   help="Run this many generations without a window and print the result")
    p.add_argument("--interval", type=int, default=None, help="Milliseconds between steps")
    p.add_argument("--plot", type=str, metavar="PATH", default=None,
                   help="After a --headless run, save the pheromone heatmap and best-length history")
    p.add_argument("--no-labels", action="store_true", help="Hide d / tau edge labels")
    p.add_argument("-v", "--verbose", action="count", default=0, help="-v for INFO, -vv for DEBUG")
    return p


def resolve_config(args):
    cfg = load_config()
    if args.config:
        cfg = merge_config(cfg, load_config(args.config))

    overrides = {k: getattr(args, k) for k in ("alpha", "beta", "rho", "q", "tau0")
                 if getattr(args, k) is not None}
    if overrides:
        cfg = merge_config(cfg, {"aco": overrides})

    sim_overrides = {}
    if args.nodes is not None:
        sim_overrides["node_count"] = args.nodes
    if args.ants is not None:
        sim_overrides["ant_count"] = args.ants
    if args.seed is not None:
        sim_overrides["seed"] = args.seed
    if args.interval is not None:
        cfg = merge_config(cfg, {"display": {"interval_ms": args.interval}})
    if sim_overrides:
        cfg = merge_config(cfg, {"simulation": sim_overrides})
    return cfg


def save_plots(sim, path):
    """Writes the pheromone heatmap and the best-length history side by side."""
    import matplotlib.pyplot as plt
    from antcolony.pheromone_heatmap import best_length_plot, pheromone_heatmap

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(10, 4))
    pheromone_heatmap(sim.pheromones.matrix, ax=ax1)
    best_length_plot(sim.best_length_history, ax=ax2)
    fig.tight_layout()
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)


def main(argv=None):
    parser = build_argparser()
    args = parser.parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    if args.plot and args.headless is None:
        parser.error("--plot requires --headless")

    try:
        cfg = resolve_config(args)
        params = ACOParams.from_config(cfg)
        nodes, ants, seed = simulation_settings(cfg)
        display = display_settings(cfg)
    except InvalidConfiguration as exc:
        parser.error(str(exc))

    if args.headless is None:
        lo, hi = display["min_nodes"], display["max_nodes"]
        if not lo <= nodes <= hi:
            parser.error(f"--nodes must be in [{lo}, {hi}] for the animated view")
        if not 1 <= ants <= display["max_ants"]:
            parser.error(f"--ants must be in [1, {display['max_ants']}]")

    try:
        sim = Simulation(nodes, ants, params=params, seed=seed)
    except InvalidConfiguration as exc:
        parser.error(str(exc))

    if args.headless is not None:
        res = sim.run(generations=args.headless)
        if res.best_tour is None:
            print("No solution yet.")
        else:
            print("Best tour:", " -> ".join(map(str, res.best_tour)))
            print(f"Best length: {res.best_length:.3f}")
        print("Iterations:", res.iterations)
        if args.plot:
            save_plots(sim, args.plot)
            print("Saved:", args.plot)
        return 0

    import matplotlib.pyplot as plt
    from antcolony.visualizer import animate

    fig, ani = animate(
        sim,
        interval=display["interval_ms"],
        show_labels=not args.no_labels,
        node_range=(display["min_nodes"], display["max_nodes"]),
        max_ants=display["max_ants"],
    )
    plt.show()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
