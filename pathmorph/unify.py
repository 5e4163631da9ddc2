"""Pairing of keyframe instructions into interpolatable segments.

Two keyframes may draw the same outline position with different primitives
(a line in one, a cubic in the other).  Each positional pair is promoted to a
single command type able to represent both sides, after which the point can
be interpolated coordinate by coordinate.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .ast import Instruction, Point, Segment, Step, Vec2
from .logging_utils import apply_debug_logging, debug_log_call
from .parser import ARG_COUNTS
from .validate import STRUCTURAL, validate_pair

logger = logging.getLogger(__name__)

Promoter = Callable[[Instruction, Optional[Instruction]], List[float]]

REFLECTABLE = ('C', 'S', 'Q')


def unify_types(a: str, b: str) -> str:
    """Return the command letter able to express both ``a`` and ``b``."""
    a, b = a.upper(), b.upper()
    if a == b:
        return a
    if a in STRUCTURAL or b in STRUCTURAL:
        raise ValueError(f"cannot unify {a} with {b}")
    if a in ('Q', 'T') and b in ('Q', 'T'):
        return 'Q'
    if 'C' in (a, b) or 'S' in (a, b):
        return 'C'
    if {a, b} in ({'L', 'H'}, {'L', 'V'}):
        return 'L'
    return 'C'


def _well_formed(ins: Instruction) -> bool:
    return len(ins.coordinates.abs) == ARG_COUNTS[ins.command]


def _end(ins: Instruction) -> List[float]:
    return list(ins.end.abs)


def _start(ins: Instruction) -> List[float]:
    return list(ins.start.abs)


def last_control_point(ins: Instruction) -> Optional[Vec2]:
    """Return the control point adjacent to the end of a curve instruction."""
    if ins.command not in REFLECTABLE or not _well_formed(ins):
        return None
    vals = ins.coordinates.abs
    if ins.command == 'C':
        return (vals[2], vals[3])
    return (vals[0], vals[1])


def reflected_control_point(ins: Instruction, previous: Optional[Instruction]) -> Vec2:
    """Mirror the previous curve's last control point across ``ins.start``.

    Falls back to the start anchor when there is nothing to reflect.
    """
    sx, sy = ins.start.abs
    control = last_control_point(previous) if previous is not None else None
    if control is None:
        return (sx, sy)
    return (sx + (sx - control[0]), sy + (sy - control[1]))


def to_line(ins: Instruction, previous: Optional[Instruction]) -> List[float]:
    return _end(ins)


def to_horizontal(ins: Instruction, previous: Optional[Instruction]) -> List[float]:
    return [ins.end.abs[0]]


def to_vertical(ins: Instruction, previous: Optional[Instruction]) -> List[float]:
    return [ins.end.abs[1]]


def to_cubic(ins: Instruction, previous: Optional[Instruction]) -> List[float]:
    cmd = ins.command
    vals = list(ins.coordinates.abs)
    if _well_formed(ins):
        if cmd == 'C':
            return vals
        if cmd == 'S':
            return list(reflected_control_point(ins, previous)) + vals
        if cmd == 'Q':
            return vals[0:2] + vals[0:2] + vals[2:4]
        if cmd == 'T':
            control = list(reflected_control_point(ins, previous))
            return control + control + vals
    # straight chord: first control on the start anchor, second on the end
    return _start(ins) + _end(ins) + _end(ins)


def to_quadratic(ins: Instruction, previous: Optional[Instruction]) -> List[float]:
    cmd = ins.command
    if cmd not in ('Q', 'T'):
        raise ValueError(f"cannot express {ins.type} as a quadratic curve")
    if _well_formed(ins):
        if cmd == 'Q':
            return list(ins.coordinates.abs)
        return list(reflected_control_point(ins, previous)) + list(ins.coordinates.abs)
    return _start(ins) + _end(ins)


def _passthrough(target: str) -> Promoter:
    def promote_same(ins: Instruction, previous: Optional[Instruction]) -> List[float]:
        if ins.command != target:
            raise ValueError(f"cannot express {ins.type} as {target}")
        if _well_formed(ins):
            return list(ins.coordinates.abs)
        if target == 'S':
            return _start(ins) + _end(ins)
        if target == 'A':
            # zero radii render as a straight line
            return [0.0, 0.0, 0.0, 0.0, 0.0] + _end(ins)
        return _end(ins)

    promote_same.__name__ = promote_same.__qualname__ = f"to_{target.lower()}_passthrough"
    return promote_same


def to_close(ins: Instruction, previous: Optional[Instruction]) -> List[float]:
    return []


def promote(ins: Instruction, previous: Optional[Instruction], target: str) -> List[float]:
    """Re-express ``ins`` as the argument list of command ``target``."""
    try:
        promoter = PROMOTERS[target.upper()]
    except KeyError as exc:
        raise ValueError(f"unknown command type {target!r}") from exc
    return promoter(ins, previous)


def match_steps(source: Step, target: Step, index: int = 1) -> Segment:
    """Pair two steps position by position into a :class:`Segment`.

    ``index`` is the keyframe number of ``target``, used in error messages.
    """
    validate_pair(source, target, index)
    points: List[Point] = []
    prev_a: Optional[Instruction] = None
    prev_b: Optional[Instruction] = None
    for a, b in zip(source, target):
        kind = unify_types(a.type, b.type)
        points.append(
            Point(
                type=kind,
                from_=tuple(promote(a, prev_a, kind)),
                to=tuple(promote(b, prev_b, kind)),
            )
        )
        prev_a, prev_b = a, b
    return Segment(points=tuple(points))


def build_segments(steps: Sequence[Step]) -> Tuple[Segment, ...]:
    segments = tuple(match_steps(steps[idx - 1], steps[idx], idx) for idx in range(1, len(steps)))
    logger.debug("built %d segment(s) from %d step(s)", len(segments), len(steps))
    return segments


apply_debug_logging(globals(), logger=logger, skip={'_well_formed', '_end', '_start', '_passthrough'})

# built after wrapping so promotions are traced too
PROMOTERS: Dict[str, Promoter] = {
    'M': to_line,
    'L': to_line,
    'H': to_horizontal,
    'V': to_vertical,
    'C': to_cubic,
    'Q': to_quadratic,
    'S': debug_log_call(logger)(_passthrough('S')),
    'T': debug_log_call(logger)(_passthrough('T')),
    'A': debug_log_call(logger)(_passthrough('A')),
    'Z': to_close,
}
