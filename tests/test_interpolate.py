import pytest

from pathmorph.ast import Point
from pathmorph.interpolate import interpolate_point, interpolate_segment
from pathmorph.parser import parse_step
from pathmorph.printer import format_number, print_commands
from pathmorph.unify import match_steps


def test_line_morphs_into_cubic_halfway():
    segment = match_steps(parse_step('M0,0 L10,0'), parse_step('M0,0 C2,2 4,4 10,10'))
    assert segment.types == ['M', 'C']
    commands = interpolate_segment(segment, 0.5)
    assert commands[1] == ('C', pytest.approx((1.0, 1.0, 7.0, 2.0, 10.0, 5.0)))
    assert print_commands(commands) == 'M0 0 C1 1 7 2 10 5'


def test_close_point_passes_through():
    assert interpolate_point(Point('Z'), 0.3) == ('Z', ())


@pytest.mark.parametrize('progress, expected', [(0.0, (2.0, 4.0)), (1.0, (6.0, 0.0)), (0.25, (3.0, 3.0))])
def test_interpolate_point_is_linear(progress, expected):
    point = Point('L', (2.0, 4.0), (6.0, 0.0))
    assert interpolate_point(point, progress) == ('L', pytest.approx(expected))


def test_point_lengths_must_match():
    with pytest.raises(ValueError):
        Point('L', (1.0, 2.0), (1.0,))


@pytest.mark.parametrize(
    'value, precision, expected',
    [(1.0, 3, '1'), (0.1234, 3, '0.123'), (-0.0001, 3, '0'), (2.5, 3, '2.5'), (12.3456, 2, '12.35'), (7.9, 0, '8')],
)
def test_format_number(value, precision, expected):
    assert format_number(value, precision) == expected
