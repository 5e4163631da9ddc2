import logging

import pytest

import pathmorph.config as config_module
from pathmorph.config import MorphConfig, build_config, get_default_config, get_profile, set_default_config
from pathmorph.easing import ease_in_out_quad, get_easing, linear


@pytest.mark.parametrize(
    'options, field, expected',
    [
        ({'duration': -5}, 'duration', 500.0),
        ({'duration': 'slow'}, 'duration', 500.0),
        ({'duration': 250}, 'duration', 250.0),
        ({'iterations': 'many'}, 'iterations', -1),
        ({'iterations': -3}, 'iterations', -1),
        ({'iterations': 2.0}, 'iterations', 2),
        ({'iterations': True}, 'iterations', -1),
        ({'alternate': 1}, 'alternate', True),
        ({'precision': -1}, 'precision', 3),
    ],
)
def test_invalid_values_fall_back_to_defaults(options, field, expected):
    assert getattr(build_config(options), field) == expected


def test_easing_accepts_names_and_callables():
    assert build_config({'easing': 'linear'}).easing is linear
    assert build_config({'easing': 'ease-in-out'}).easing is ease_in_out_quad
    assert build_config({'easing': 5}).easing is ease_in_out_quad
    assert get_easing('nope') is None


def test_default_easing_is_quadratic_in_out():
    easing = MorphConfig().easing
    assert easing(0.25) == pytest.approx(0.125)
    assert easing(0.5) == pytest.approx(0.5)
    assert easing(0.75) == pytest.approx(0.875)


def test_invalid_option_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger='pathmorph.config'):
        build_config({'duration': -1, 'colour': 'red'})
    assert 'Invalid duration' in caplog.text
    assert "Ignoring unknown option 'colour'" in caplog.text


def test_default_config_is_copied(monkeypatch):
    monkeypatch.setattr(config_module, '_DEFAULT_CONFIG', MorphConfig())
    cfg = get_default_config()
    cfg.duration = 1
    assert get_default_config().duration == 500.0

    set_default_config(MorphConfig(duration=900))
    assert build_config().duration == 900.0


def test_profiles():
    assert get_profile('pingpong').alternate is True
    assert get_profile('once').iterations == 0
    assert get_profile('default').alternate is False
    with pytest.raises(ValueError):
        get_profile('bounce')
