from typing import Sequence

from .ast import Step

STRUCTURAL = ('M', 'Z')


class ValidationError(Exception):
    pass


class KeyframeMismatchError(ValidationError):
    """Raised when two consecutive keyframes cannot be paired position by position."""

    def __init__(self, index: int, message: str):
        super().__init__(f'[keyframe {index}] {message}')
        self.index = index


def validate_pair(previous: Step, current: Step, index: int) -> None:
    """Check that ``current`` (keyframe ``index``) can morph from ``previous``."""
    if len(previous) != len(current):
        raise KeyframeMismatchError(
            index,
            f'expected {len(previous)} instructions, got {len(current)}',
        )
    for pos, (a, b) in enumerate(zip(previous, current)):
        if a.command == b.command:
            continue
        if a.command in STRUCTURAL or b.command in STRUCTURAL:
            raise KeyframeMismatchError(
                index,
                f'instruction {pos}: cannot morph {a.type} into {b.type}',
            )


def validate_keyframes(steps: Sequence[Step]) -> None:
    for idx in range(1, len(steps)):
        validate_pair(steps[idx - 1], steps[idx], idx)
