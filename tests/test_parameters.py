"""
Unit tests for the parameter panel
"""
from unittest.mock import MagicMock

import pytest

from animation.core import Vec2
from animation.parameters import Parameter, ParameterPanel, default_parameters, spring_config


def test_default_parameters():
    """Defaults and bounds match the playground sliders"""
    params = {p.name: p for p in default_parameters()}

    assert set(params) == {"speed", "damping", "velocity_x", "velocity_y"}
    assert (params["speed"].default, params["speed"].minimum, params["speed"].maximum) == (3.0, 0.3, 6.0)
    assert (params["damping"].default, params["damping"].minimum, params["damping"].maximum) == (0.5, 0.1, 1.0)
    assert (params["velocity_x"].minimum, params["velocity_x"].maximum) == (0.0, 10.0)
    assert params["velocity_y"].value == 0.0


def test_parameter_clamps():
    p = Parameter("damping", "Damping:", 0.5, minimum=0.1, maximum=1.0)

    p.value = 5
    assert p.value == 1.0
    p.value = -3
    assert p.value == 0.1
    p.value = 0.25
    assert p.value == 0.25


def test_parameter_format():
    p = Parameter("speed", "Speed:", 3, minimum=0.3, maximum=6)
    assert p.format_value() == "03.00"
    p.value = 0.3
    assert p.format_value() == "00.30"


def test_invalid_parameter_definitions():
    with pytest.raises(ValueError):
        Parameter("bad", "Bad:", 0.5, minimum=1.0, maximum=0.0)
    with pytest.raises(ValueError):
        Parameter("bad", "Bad:", 2.0, minimum=0.0, maximum=1.0)
    with pytest.raises(ValueError):
        ParameterPanel([Parameter("a", "A:", 0.0), Parameter("a", "A again:", 0.0)])


def test_subscribe_notifies_once_immediately(panel):
    listener = MagicMock()
    panel.subscribe(listener)
    listener.assert_called_once_with(None)


def test_change_notifies_with_parameter(panel):
    listener = MagicMock()
    panel.subscribe(listener)
    listener.reset_mock()

    assert panel.set_value("damping", 0.8) is True
    listener.assert_called_once_with(panel.parameter("damping"))
    assert panel["damping"] == 0.8
    assert panel.value("damping") == 0.8


def test_unchanged_value_does_not_notify(panel):
    listener = MagicMock()
    panel.subscribe(listener)
    listener.reset_mock()

    assert panel.set_value("damping", 0.5) is False
    panel.set_value("damping", 1.0)
    listener.reset_mock()
    # clamps to the same maximum
    assert panel.set_value("damping", 7.0) is False
    listener.assert_not_called()


def test_unsubscribe(panel):
    listener = MagicMock()
    panel.subscribe(listener)
    panel.unsubscribe(listener)
    listener.reset_mock()
    panel.set_value("speed", 1.0)
    listener.assert_not_called()


def test_reset_notifies_changed_only(panel):
    panel.set_value("speed", 1.0)
    panel.set_value("velocity_x", 4.0)
    changed = []
    panel.subscribe(changed.append)
    changed.clear()

    panel.reset()

    assert sorted(p.name for p in changed) == ["speed", "velocity_x"]
    assert panel.values() == {"speed": 3.0, "damping": 0.5, "velocity_x": 0.0, "velocity_y": 0.0}


def test_unknown_parameter(panel):
    assert "stiffness" not in panel
    with pytest.raises(KeyError):
        panel["stiffness"]
    with pytest.raises(KeyError):
        panel.set_value("stiffness", 1.0)


@pytest.mark.parametrize("speed,damping,vx,vy", [
    (0.3, 0.1, 0.0, 0.0),
    (3.0, 0.5, 0.0, 0.0),
    (6.0, 1.0, 10.0, 10.0),
    (1.7, 0.33, 2.5, 7.25),
])
def test_spring_config_passes_values_through(panel, speed, damping, vx, vy):
    panel.set_value("speed", speed)
    panel.set_value("damping", damping)
    panel.set_value("velocity_x", vx)
    panel.set_value("velocity_y", vy)

    config = spring_config(panel)

    assert config.duration == speed
    assert config.damping_ratio == damping
    assert config.initial_velocity == Vec2(vx, vy)
