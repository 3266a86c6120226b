"""
config.py
Default configuration and loader. Very small helper to override defaults via JSON files.
"""

import json
from pathlib import Path
from typing import Any, Dict

POW_STRATEGIES = ("builtin", "linear")

# Default constants used by the field library and the calculator CLI.
DEFAULT_CONFIG: Dict[str, Any] = {
    "pow_strategy": "builtin",     # "builtin" (square-and-multiply) or "linear"
    "log_level": "INFO",
    "default_order": 2**31 - 1,    # 2147483647, prime
}


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """
    Reject values the field library cannot use. Returns cfg unchanged.
    """
    strategy = cfg.get("pow_strategy")
    if strategy not in POW_STRATEGIES:
        raise ValueError(f"pow_strategy must be one of {POW_STRATEGIES}, got {strategy!r}")
    order = cfg.get("default_order")
    if not isinstance(order, int) or order < 1:
        raise ValueError(f"default_order must be a positive integer, got {order!r}")
    return cfg


def load_config(path: str, base: Dict[str, Any] = None) -> Dict[str, Any]:
    """
    Load a JSON config file, merge it over base and validate the result.

    :param path: path to JSON config file
    :param base: base configuration dictionary (if None use DEFAULT_CONFIG)
    :return: merged configuration dictionary
    """
    merged = DEFAULT_CONFIG.copy()
    if base is not None:
        merged.update(base)
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with p.open("r", encoding="utf-8") as fh:
        overrides = json.load(fh)
    if not isinstance(overrides, dict):
        raise ValueError(f"Config file must hold a JSON object: {path}")
    merged.update(overrides)
    return validate_config(merged)
