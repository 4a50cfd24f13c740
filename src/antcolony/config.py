import yaml
from dataclasses import dataclass, fields
from pathlib import Path

from antcolony.errors import InvalidConfiguration

DEFAULT_CONFIG = Path(__file__).parent / "configs" / "default.yaml"


def load_config(path=DEFAULT_CONFIG):
    try:
        with open(Path(path), "r") as f:
            cfg = yaml.safe_load(f)
    except FileNotFoundError as exc:
        raise InvalidConfiguration(f"config file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise InvalidConfiguration(f"config file {path} is not valid YAML: {exc}") from exc
    if not isinstance(cfg, dict):
        raise InvalidConfiguration(f"config file {path} must contain a mapping")
    return cfg


def _section(cfg, name):
    section = cfg.get(name) or {}
    if not isinstance(section, dict):
        raise InvalidConfiguration(f"'{name}' section must be a mapping, got {section!r}")
    return section


def _integer(section_name, section, key, default):
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(f"{section_name}.{key} must be an integer, got {value!r}")
    return value


def simulation_settings(cfg):
    """Validated (node_count, ant_count, seed) from the `simulation` section."""
    section = _section(cfg, "simulation")
    node_count = _integer("simulation", section, "node_count", 18)
    ant_count = _integer("simulation", section, "ant_count", 25)
    seed = section.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise InvalidConfiguration(f"simulation.seed must be an integer or null, got {seed!r}")
    return node_count, ant_count, seed


def display_settings(cfg):
    """Validated animation settings from the `display` section."""
    section = _section(cfg, "display")
    return {
        "interval_ms": _integer("display", section, "interval_ms", 120),
        "min_nodes": _integer("display", section, "min_nodes", 4),
        "max_nodes": _integer("display", section, "max_nodes", 40),
        "max_ants": _integer("display", section, "max_ants", 200),
    }


def merge_config(base, override):
    """Recursively overlay `override` onto `base`, returning a new dict."""
    merged = dict(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


@dataclass(frozen=True)
class ACOParams:
    """
    Ant System constants.

    alpha: pheromone exponent
    beta:  exponent on the distance heuristic 1/d
    rho:   fraction of pheromone retained at each generation boundary
    q:     deposit numerator (each ant lays q / tour_length)
    tau0:  initial pheromone on every edge
    """
    alpha: float = 1.0
    beta: float = 5.0
    rho: float = 0.5
    q: float = 100.0
    tau0: float = 0.1

    @classmethod
    def from_config(cls, cfg=None):
        """Build params from the `aco` section of a loaded config (defaults when None)."""
        if cfg is None:
            cfg = load_config()
        section = _section(cfg, "aco")
        known = {f.name for f in fields(cls)}
        unknown = set(section) - known
        if unknown:
            raise InvalidConfiguration(f"unknown aco options: {', '.join(sorted(unknown))}")

        values = {}
        for name, raw in section.items():
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                raise InvalidConfiguration(f"aco.{name} must be a number, got {raw!r}")
            values[name] = float(raw)
        return cls(**values)
