"""
numvec Configuration
====================
Defaults for element type, rendering and norms.
Single source of truth. Vector methods read from here when an argument
is left as None.

Usage:
    from numvec.config import CONFIG
    count = CONFIG['render']['default_count']

    from numvec import config
    config.get('norms.l0_threshold')        → 0
    config.load('numvec.yaml')              # merge overrides
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

logger = logging.getLogger(__name__)


DEFAULTS: Dict[str, Dict[str, Any]] = {

    # =================================================================
    # Element type used when a constructor is given no dtype
    # =================================================================
    'dtype': {
        'default': 'float64',
    },

    # =================================================================
    # Textual rendering
    # =================================================================
    'render': {
        'default_count': 10,
        'float_format': '{:g}',
    },

    # =================================================================
    # Norms
    # =================================================================
    'norms': {
        # |x| <= threshold counts as zero for the L0 norm
        'l0_threshold': 0,
    },
}

CONFIG: Dict[str, Dict[str, Any]] = copy.deepcopy(DEFAULTS)


def get(path: str, default=None):
    """
    Get a config value by dot-separated path.

    Usage:
        get('render.default_count')   → 10
        get('dtype.default')          → 'float64'
    """
    keys = path.split('.')
    val = CONFIG
    for key in keys:
        if isinstance(val, dict) and key in val:
            val = val[key]
        else:
            return default
    return val


def load(path: Union[str, Path]) -> Dict[str, Dict[str, Any]]:
    """
    Merge overrides from a YAML file into CONFIG.

    The file mirrors CONFIG's layout, e.g.

        render:
          default_count: 5

    Only known sections are accepted. Returns the updated CONFIG.
    """
    with open(path) as f:
        overrides = yaml.safe_load(f) or {}

    if not isinstance(overrides, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    for section, values in overrides.items():
        if section not in CONFIG:
            raise KeyError(f"Unknown config section: {section}. Available: {list(CONFIG)}")
        if not isinstance(values, dict):
            raise ValueError(f"Config section '{section}' must be a mapping")
        CONFIG[section].update(values)

    logger.info("Loaded numvec config overrides from %s", path)
    return CONFIG


def reset() -> None:
    """Restore CONFIG to DEFAULTS."""
    CONFIG.clear()
    CONFIG.update(copy.deepcopy(DEFAULTS))
