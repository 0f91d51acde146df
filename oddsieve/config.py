"""
Tooling configuration.

Loaded from YAML by run_all.py. The sieve command itself takes no
configuration.
"""

import copy
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .emitter import DEFAULT_CHUNK_SIZE

DEFAULT_CONFIG_PATH = Path('config/default.yaml')

DEFAULT_CONFIG: Dict[str, Any] = {
    'verify_bounds': [2, 3, 10, 30, 100, 1_000, 10_000, 100_000],
    'benchmark_bounds': [10**5, 10**6],
    'repeats': 3,
    'chunk_size': DEFAULT_CHUNK_SIZE,
}


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load a config file and merge it over DEFAULT_CONFIG.

    Parameters
    ----------
    path : str or Path, optional
        YAML file. If None, the defaults are returned unchanged.

    Returns
    -------
    dict
        Complete config with every key of DEFAULT_CONFIG present.

    Raises
    ------
    ValueError
        On unknown keys or a top level that is not a mapping.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path is None:
        return config

    with open(path) as f:
        loaded = yaml.safe_load(f)

    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        raise ValueError(f"{path}: top level must be a mapping, got {type(loaded).__name__}")

    unknown = sorted(set(loaded) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"{path}: unknown config keys {unknown}")

    config.update(loaded)

    if int(config['repeats']) < 1:
        raise ValueError(f"{path}: repeats must be >= 1")
    if int(config['chunk_size']) < 1:
        raise ValueError(f"{path}: chunk_size must be >= 1")
    return config
