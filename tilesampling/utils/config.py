"""Configuration management for tileable Poisson-disk sampling."""

import math
from pathlib import Path
from typing import Dict, Optional, Union

# Sampler constants
SEED_POINT = (0.5, 0.5)
NONE_INDEX = -1
PROBE_WINDOW = 2
PACKING_SQRT = math.sqrt(2.0)

DEFAULT_NUM_PROBES = 30
DEFAULT_SEED_RETRIES = 32

DEFAULT_CONFIG = {
    "num_probes": DEFAULT_NUM_PROBES,
    "min_dist": None,
    "seed": None,
    "max_seed_retries": DEFAULT_SEED_RETRIES,
    "verbose": False,
}


def default_cfg() -> Dict:
    """Default sampler configuration (min_dist derived from kernel size)."""
    return DEFAULT_CONFIG.copy()


def load_cfg(path: Union[str, Path], base: Optional[Dict] = None) -> Dict:
    """Load a YAML config file and merge it over the defaults."""
    import yaml

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError(f"Config file must contain a mapping, got {type(loaded).__name__}")

    # Sampler settings may sit at the top level or under a "poisson" section
    if isinstance(loaded.get("poisson"), dict):
        loaded = loaded["poisson"]

    unknown = sorted(set(loaded) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"Unknown config field(s): {', '.join(unknown)}")

    config = default_cfg() if base is None else dict(base)
    config.update(loaded)
    return config
