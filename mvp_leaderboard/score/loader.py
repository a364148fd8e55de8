"""
Configuration loader for the MVP point table with validation and hashing
"""
import os
import yaml
import hashlib
import logging
from typing import Dict

logger = logging.getLogger("score.loader")

DEFAULT_CFG = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.yml")

def _as_points(value, key: str) -> int:
    """Coerce an integral number or numeric string to int, else raise"""
    if isinstance(value, bool):
        raise ValueError(f"[points] {key}={value!r} is not a number")
    if isinstance(value, int):
        return value
    try:
        as_float = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"[points] {key}={value!r} is not a number")
    if not as_float.is_integer():
        raise ValueError(f"[points] {key}={value!r} is not a whole number")
    return int(as_float)

def _check_points(table: dict, mode: str) -> Dict[str, int]:
    """
    Validate and optionally coerce point values to integers

    Every mode rejects values that are not whole numbers; 'off' only
    skips coercion of numeric strings/floats and the negative check.

    Args:
        table: Action code -> points as read from YAML
        mode: Validation mode ('auto', 'strict', 'off')

    Returns:
        Point table with string keys
    """
    if not table:
        return {}

    # YAML turns numeric-looking keys into ints
    table = {str(k): v for k, v in table.items()}

    if mode == "off":
        for key, value in table.items():
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"[points] {key}={value!r} must be an integer")
        logger.info(f"[points] {len(table)} actions (accepted without range checks)")
        return table

    fixed = {}
    for key, value in table.items():
        if mode == "strict":
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"[points] {key}={value!r} must be an integer (strict mode)")
            points = value
        else:
            points = _as_points(value, key)
            if not isinstance(value, int):
                logger.warning(f"[points] {key}={value!r} → coerced to {points}")
        if points < 0:
            raise ValueError(f"[points] {key}={points} must not be negative")
        fixed[key] = points
    return fixed

def load_config(path: str = DEFAULT_CFG) -> dict:
    """
    Load and validate configuration from YAML file

    Args:
        path: Path to configuration file

    Returns:
        Validated configuration dictionary
    """
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}

    points = cfg.setdefault("points", {})
    mode = points.get("validate")
    # unquoted `off` reads back from YAML as False
    mode = "off" if mode is False else str(mode or "auto").lower()
    points["table"] = _check_points(points.get("table") or {}, mode)

    flt = cfg.setdefault("filter", {})
    threshold = flt.get("top_performers_threshold", 20)
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise ValueError(f"[filter] top_performers_threshold={threshold!r} is not a number")
    flt["top_performers_threshold"] = threshold

    logger.info(f"Loaded config from {path}")
    return cfg

def point_table(cfg: dict) -> Dict[str, int]:
    """Normalized action code -> points mapping from a loaded config"""
    return dict(cfg.get("points", {}).get("table") or {})

def config_hash(cfg: dict) -> str:
    """
    Generate SHA1 hash of configuration for caching

    Args:
        cfg: Configuration dictionary

    Returns:
        SHA1 hash string
    """
    blob = yaml.safe_dump(cfg, sort_keys=True, allow_unicode=True)
    return hashlib.sha1(blob.encode("utf-8")).hexdigest()
