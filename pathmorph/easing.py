"""Easing curves mapping a linear time fraction to a progress fraction."""

import math
from typing import Callable, Dict, Optional, Union

Easing = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return t * (2 - t)


def ease_in_out_quad(t: float) -> float:
    return 2 * t * t if t < 0.5 else -1 + (4 - 2 * t) * t


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    return 4 * t * t * t if t < 0.5 else 1 - (-2 * t + 2) ** 3 / 2


def ease_in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


EASING_FUNCTIONS: Dict[str, Easing] = {
    'linear': linear,
    'ease_in': ease_in_quad,
    'ease_out': ease_out_quad,
    'ease_in_out': ease_in_out_quad,
    'ease_in_cubic': ease_in_cubic,
    'ease_out_cubic': ease_out_cubic,
    'ease_in_out_cubic': ease_in_out_cubic,
    'ease_in_out_sine': ease_in_out_sine,
}

DEFAULT_EASING: Easing = ease_in_out_quad


def get_easing(value: Union[str, Easing, None]) -> Optional[Easing]:
    """Resolve a name or callable to an easing function, None if unusable."""
    if callable(value):
        return value
    if isinstance(value, str):
        return EASING_FUNCTIONS.get(value.strip().lower().replace('-', '_'))
    return None
