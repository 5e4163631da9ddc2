from .ast import Anchor, Coordinates, Instruction, Point, Segment, Step
from .lexer import scan_path
from .parser import canonicalize, parse_step, parse_steps
from .validate import ValidationError, KeyframeMismatchError, validate_keyframes
from .unify import unify_types, promote, match_steps, build_segments
from .interpolate import interpolate_point, interpolate_segment
from .printer import format_number, print_commands, print_step
from .easing import EASING_FUNCTIONS, ease_in_out_quad, get_easing
from .config import MorphConfig, build_config, get_default_config, set_default_config, get_profile
from .timeline import Frame, Timeline, TimelineState
from .morpher import ElementHost, HostError, Morpher, PathHost, RecordingHost

__all__ = [
    'Anchor',
    'Coordinates',
    'Instruction',
    'Point',
    'Segment',
    'Step',
    'scan_path',
    'canonicalize',
    'parse_step',
    'parse_steps',
    'ValidationError',
    'KeyframeMismatchError',
    'validate_keyframes',
    'unify_types',
    'promote',
    'match_steps',
    'build_segments',
    'interpolate_point',
    'interpolate_segment',
    'format_number',
    'print_commands',
    'print_step',
    'EASING_FUNCTIONS',
    'ease_in_out_quad',
    'get_easing',
    'MorphConfig',
    'build_config',
    'get_default_config',
    'set_default_config',
    'get_profile',
    'Frame',
    'Timeline',
    'TimelineState',
    'ElementHost',
    'HostError',
    'Morpher',
    'PathHost',
    'RecordingHost',
]
