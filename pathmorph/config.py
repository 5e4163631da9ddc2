"""Configuration for morph playback."""

from __future__ import annotations

import copy
import logging
import math
import numbers
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional

from .easing import DEFAULT_EASING, Easing, get_easing

logger = logging.getLogger(__name__)


@dataclass
class MorphConfig:
    """Playback options for a :class:`~pathmorph.morpher.Morpher`."""

    # length of one iteration in milliseconds
    duration: float = 500.0
    # last iteration index played before stopping; -1 loops forever
    iterations: int = -1
    alternate: bool = False
    easing: Easing = DEFAULT_EASING
    # decimal places in emitted path data
    precision: int = 3


PROFILES = {
    'default': MorphConfig(),
    'pingpong': MorphConfig(alternate=True),
    'once': MorphConfig(iterations=0),
}

_DEFAULT_CONFIG = MorphConfig()


def get_default_config() -> MorphConfig:
    return copy.deepcopy(_DEFAULT_CONFIG)


def set_default_config(config: MorphConfig) -> None:
    global _DEFAULT_CONFIG
    _DEFAULT_CONFIG = copy.deepcopy(config)


def get_profile(name: str) -> MorphConfig:
    try:
        return copy.deepcopy(PROFILES[name])
    except KeyError as exc:
        raise ValueError(f"unknown profile {name!r} (expected one of {', '.join(sorted(PROFILES))})") from exc


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def sanitize_duration(value: Any, default: float) -> float:
    if _is_number(value) and math.isfinite(value) and value >= 0:
        return float(value)
    logger.warning("Invalid duration %r, using %s", value, default)
    return default


def sanitize_iterations(value: Any, default: int) -> int:
    if _is_number(value) and math.isfinite(value) and float(value).is_integer():
        value = int(value)
        if value == -1 or value >= 0:
            return value
    logger.warning("Invalid iteration count %r, using %s", value, default)
    return default


def sanitize_easing(value: Any, default: Easing) -> Easing:
    easing = get_easing(value)
    if easing is None:
        logger.warning("Invalid easing %r, using default", value)
        return default
    return easing


def sanitize_precision(value: Any, default: int) -> int:
    if _is_number(value) and float(value).is_integer() and 0 <= value <= 12:
        return int(value)
    logger.warning("Invalid precision %r, using %s", value, default)
    return default


_SANITIZERS = {
    'duration': sanitize_duration,
    'iterations': sanitize_iterations,
    'alternate': lambda value, default: bool(value),
    'easing': sanitize_easing,
    'precision': sanitize_precision,
}


def build_config(options: Optional[Mapping[str, Any]] = None, base: Optional[MorphConfig] = None) -> MorphConfig:
    """Merge ``options`` over ``base`` (or the process default).

    Invalid values fall back to the base value instead of raising.
    """
    config = copy.deepcopy(base) if base is not None else get_default_config()
    known = {f.name for f in fields(MorphConfig)}
    changes = {}
    for key, value in (options or {}).items():
        if key not in known:
            logger.warning("Ignoring unknown option %r", key)
            continue
        changes[key] = _SANITIZERS[key](value, getattr(config, key))
    return replace(config, **changes)
