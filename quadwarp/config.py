"""
Configuration management for quadwarp
"""

import copy
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from quadwarp.errors import InvalidInputError

DEFAULT_CONFIG = {
    "solver": {
        "pivot_tolerance": 1e-12,
        "degeneracy_tolerance": 1e-10,
        "verify": False
    },
    "verifier": {
        "tolerance": 1e-6
    },
    "codec": {
        "precision": 10,
        "transform_origin": "0 0"
    },
    "editor": {
        "canvas_width": 800,
        "canvas_height": 800
    }
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def merge_config(override: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return a copy of DEFAULT_CONFIG with ``override`` merged on top."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if override:
        _merge(config, copy.deepcopy(override))
    return config


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file.

    Args:
        path: YAML file to read; defaults only when omitted

    Returns:
        Configuration dictionary with file values merged over the defaults
    """
    if path is None:
        return merge_config()

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return merge_config()
    if not isinstance(data, dict):
        raise InvalidInputError(f"Config file {path} must contain a mapping")

    return merge_config(data)
