import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from .ast import ORIGIN, Anchor, Coordinates, Instruction, Step, Vec2
from .lexer import RawInstruction, scan_path

logger = logging.getLogger(__name__)

ARG_COUNTS = {
    'M': 2,
    'Z': 0,
    'L': 2,
    'H': 1,
    'V': 1,
    'C': 6,
    'S': 4,
    'Q': 4,
    'T': 2,
    'A': 7,
}

# rx, ry, x-axis-rotation, large-arc-flag, sweep-flag, x, y
_ARC_ENDPOINT = {5: 0, 6: 1}


def axis_of(command: str, index: int) -> Optional[int]:
    """Return 0 (x), 1 (y) or None when the argument is not a position."""
    cmd = command.upper()
    if cmd == 'H':
        return 0
    if cmd == 'V':
        return 1
    if cmd == 'A':
        return _ARC_ENDPOINT.get(index)
    return index % 2


def expand_repeats(command: str, coords: Sequence[float]) -> List[RawInstruction]:
    """Split implicitly repeated argument groups into separate records."""
    size = ARG_COUNTS[command.upper()]
    if size == 0:
        if coords:
            logger.debug("dropping %d coordinate(s) after %s", len(coords), command)
        return [(command, [])]
    if len(coords) < size:
        return [(command, list(coords))]
    groups = len(coords) // size
    leftover = len(coords) - groups * size
    if leftover:
        logger.debug("dropping %d trailing coordinate(s) after %s", leftover, command)
    out: List[RawInstruction] = []
    for idx in range(groups):
        cmd = command
        if idx and command.upper() == 'M':
            # extra moveto pairs are treated as lineto
            cmd = 'l' if command.islower() else 'L'
        out.append((cmd, list(coords[idx * size:(idx + 1) * size])))
    return out


def _resolve_end(command: str, coords: Sequence[float], start: Vec2, subpath_start: Vec2) -> Vec2:
    cmd = command.upper()
    relative = command.islower()
    sx, sy = start
    if cmd == 'Z':
        return subpath_start
    if cmd in ('H', 'V'):
        if not coords:
            return start
        value = coords[-1]
        if cmd == 'H':
            return (sx + value if relative else value, sy)
        return (sx, sy + value if relative else value)
    if len(coords) < 2:
        return start
    x, y = coords[-2], coords[-1]
    if relative:
        return (sx + x, sy + y)
    return (x, y)


def canonicalize(
    command: str,
    coords: Sequence[float],
    previous: Optional[Instruction] = None,
    subpath_start: Optional[Vec2] = None,
) -> Instruction:
    """Resolve anchors and fill in both coordinate forms for one record."""
    start = previous.end if previous is not None else Anchor()
    sx, sy = start.abs
    if subpath_start is None:
        subpath_start = start.abs

    ex, ey = _resolve_end(command, coords, start.abs, subpath_start)
    end = Anchor(abs=(ex, ey), rel=(ex - sx, ey - sy))

    abs_vals: List[float] = []
    rel_vals: List[float] = []
    relative = command.islower()
    for idx, value in enumerate(coords):
        axis = axis_of(command, idx)
        offset = 0.0 if axis is None else start.abs[axis]
        if relative:
            rel_vals.append(value)
            abs_vals.append(value + offset)
        else:
            abs_vals.append(value)
            rel_vals.append(value - offset)

    return Instruction(
        type=command,
        coordinates=Coordinates(abs=tuple(abs_vals), rel=tuple(rel_vals)),
        start=start,
        end=end,
    )


def canonicalize_all(records: Iterable[RawInstruction]) -> List[Instruction]:
    out: List[Instruction] = []
    previous: Optional[Instruction] = None
    subpath_start: Vec2 = ORIGIN
    for command, coords in records:
        for cmd, group in expand_repeats(command, coords):
            ins = canonicalize(cmd, group, previous, subpath_start)
            if ins.command == 'M':
                subpath_start = ins.end.abs
            out.append(ins)
            previous = ins
    return out


def parse_step(text: str) -> Step:
    """Parse one keyframe's path description into a :class:`Step`."""
    instructions = canonicalize_all(scan_path(text))
    logger.debug("parsed %d instruction(s) from %r", len(instructions), text)
    return Step(instructions=tuple(instructions), source=text)


def parse_steps(texts: Iterable[str]) -> Tuple[Step, ...]:
    return tuple(parse_step(text) for text in texts)
