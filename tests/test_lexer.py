import pytest

from pathmorph.lexer import ScannerState, scan_path, starts_new_token


def test_scan_splits_commands_and_coordinates():
    assert scan_path('M0,0 L10,0') == [('M', [0.0, 0.0]), ('L', [10.0, 0.0])]


@pytest.mark.parametrize(
    'text, coords',
    [
        ('M10-20', [10.0, -20.0]),
        ('M-5-5', [-5.0, -5.0]),
        ('M+1+2', [1.0, 2.0]),
        ('M1e-5 2', [1e-5, 2.0]),
        ('M0.5.5', [0.5, 0.5]),
        ('M1,,2', [1.0, 2.0]),
        ('M 1\t2\n', [1.0, 2.0]),
    ],
)
def test_numeric_token_splitting(text, coords):
    assert scan_path(text) == [('M', coords)]


def test_close_path_has_no_coordinates():
    assert scan_path('M1 2z') == [('M', [1.0, 2.0]), ('z', [])]


def test_coordinates_before_first_command_are_absorbed():
    assert scan_path('12 34 M1 2') == [('M', [1.0, 2.0])]


def test_malformed_tokens_are_dropped():
    assert scan_path('M1 .. 2 L e') == [('M', [1.0, 2.0]), ('L', [])]


def test_unknown_characters_are_ignored():
    assert scan_path('M1 2 #L3 4') == [('M', [1.0, 2.0]), ('L', [3.0, 4.0])]


@pytest.mark.parametrize(
    'ch, token, expected',
    [
        ('-', '', False),
        ('-', '3', True),
        ('-', '3e', False),
        ('+', '', False),
        ('+', '7', True),
        ('.', '1', False),
        ('.', '1.5', True),
        ('5', '1', False),
    ],
)
def test_starts_new_token(ch, token, expected):
    assert starts_new_token(ch, token) is expected


def test_scanner_state_flushes_on_new_command():
    state = ScannerState()
    state.begin('M')
    for ch in '1 2':
        state.feed(ch)
    state.begin('L')
    assert state.records == [('M', [1.0, 2.0])]
    assert state.command == 'L'
