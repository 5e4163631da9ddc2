from typing import Iterable

from .ast import Step
from .interpolate import Command

DEFAULT_PRECISION = 3


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    text = f"{value:.{precision}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text in ('-0', ''):
        return '0'
    return text


def format_command(command: Command, precision: int = DEFAULT_PRECISION) -> str:
    kind, values = command
    if kind.upper() == 'Z' or not values:
        return kind
    return kind + ' '.join(format_number(v, precision) for v in values)


def print_commands(commands: Iterable[Command], *, precision: int = DEFAULT_PRECISION) -> str:
    """Join commands into a path-description string."""
    return ' '.join(format_command(cmd, precision) for cmd in commands)


def print_step(step: Step, *, relative: bool = False, precision: int = DEFAULT_PRECISION) -> str:
    """Render a parsed step back to path data, all absolute or all relative."""
    commands = []
    for ins in step:
        if relative:
            commands.append((ins.type.lower(), ins.coordinates.rel))
        else:
            commands.append((ins.type.upper(), ins.coordinates.abs))
    return print_commands(commands, precision=precision)
