from typing import List, Tuple

import numpy as np

from .ast import Point, Segment

Command = Tuple[str, Tuple[float, ...]]


def lerp(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    return a + (b - a) * t


def interpolate_point(point: Point, progress: float) -> Command:
    """Return ``(type, values)`` for ``point`` at ``progress`` in ``[0, 1]``."""
    if point.type == 'Z':
        return ('Z', ())
    src = np.asarray(point.from_, dtype=float)
    dst = np.asarray(point.to, dtype=float)
    return (point.type, tuple(float(v) for v in lerp(src, dst, progress)))


def interpolate_segment(segment: Segment, progress: float) -> List[Command]:
    return [interpolate_point(point, progress) for point in segment]
