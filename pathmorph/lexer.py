import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

RawInstruction = Tuple[str, List[float]]  # (command letter, coordinates)

COMMANDS = 'MZLHVCSQTA'
SEPARATORS = ', \t\r\n\f'
SIGNS = '+-'
EXPONENT = 'eE'
DIGITS = '0123456789'


def is_command_char(ch: str) -> bool:
    return len(ch) == 1 and ch.upper() in COMMANDS


def is_separator(ch: str) -> bool:
    return ch in SEPARATORS


def is_coordinate_char(ch: str) -> bool:
    return ch in DIGITS or ch == '.' or ch in SIGNS or ch in EXPONENT or is_separator(ch)


def starts_new_token(ch: str, token: str) -> bool:
    """Return True when ``ch`` closes ``token`` and opens the next one.

    Separators are handled by the caller and never reach this predicate.
    """
    if ch in SIGNS:
        return bool(token) and token[-1] not in EXPONENT
    if ch == '.':
        mantissa = token
        for marker in EXPONENT:
            mantissa = mantissa.split(marker, 1)[0]
        return '.' in mantissa or len(mantissa) != len(token)
    return False


def parse_number(token: str) -> Optional[float]:
    try:
        return float(token)
    except ValueError:
        logger.debug("dropping malformed numeric token %r", token)
        return None


@dataclass
class ScannerState:
    records: List[RawInstruction] = field(default_factory=list)
    command: Optional[str] = None
    tokens: List[str] = field(default_factory=list)
    token: str = ''

    def begin(self, command: str) -> None:
        self.flush()
        self.command = command

    def feed(self, ch: str) -> None:
        if self.command is None:
            # stray coordinates before the first command belong to no record
            return
        if is_separator(ch):
            self.break_token()
        elif starts_new_token(ch, self.token):
            self.break_token()
            self.token = ch
        else:
            self.token += ch

    def break_token(self) -> None:
        if self.token:
            self.tokens.append(self.token)
        self.token = ''

    def flush(self) -> None:
        self.break_token()
        if self.command is not None:
            coords = [value for value in map(parse_number, self.tokens) if value is not None]
            self.records.append((self.command, coords))
        self.command = None
        self.tokens = []


def scan_path(text: str) -> List[RawInstruction]:
    """Split a path-description string into raw ``(command, coordinates)`` records."""
    state = ScannerState()
    for col, ch in enumerate(text, start=1):
        if is_command_char(ch):
            state.begin(ch)
        elif is_coordinate_char(ch):
            state.feed(ch)
        else:
            logger.debug("ignoring unexpected character %r at col %d", ch, col)
    state.flush()
    return state.records
