from unittest.mock import MagicMock

import pytest

from animation.kinds import AnimationKind
from animation.shared import apply_shared, push_panel, seed_shared, status_line


@pytest.fixture
def shared():
    d = {}
    seed_shared(d)
    return d


@pytest.fixture
def controller():
    return MagicMock()


def test_seed_shared(shared):
    assert shared["speed"] == 3.0
    assert shared["damping"] == 0.5
    assert shared["kind"] == "Translate X"
    assert shared["__exit__"] is False


def test_apply_shared_pushes_slider_values(shared, panel, controller):
    shared["damping"] = 0.75
    shared["velocity_x"] = "4"

    assert apply_shared(shared, panel, controller) is True
    assert panel["damping"] == 0.75
    assert panel["velocity_x"] == 4.0
    controller.set_kind.assert_called_once_with(AnimationKind.TRANSLATE_X)


def test_apply_shared_ignores_bad_values(shared, panel, controller):
    shared["speed"] = "fast"
    shared["kind"] = "Rotate"

    apply_shared(shared, panel, controller)

    assert panel["speed"] == 3.0
    controller.set_kind.assert_not_called()


def test_apply_shared_flags(shared, panel, controller):
    panel.set_value("speed", 1.0)
    shared["speed"] = 1.0
    shared["reset_parameters"] = True
    shared["toggle_pause"] = True
    shared["kind"] = "Scale"

    apply_shared(shared, panel, controller)

    assert panel["speed"] == 3.0
    assert shared["speed"] == 3.0
    assert shared["reset_parameters"] is False
    assert shared["toggle_pause"] is False
    controller.toggle_pause.assert_called_once_with()
    controller.set_kind.assert_called_once_with(AnimationKind.SCALE)


def test_apply_shared_exit(shared, panel, controller):
    shared["__exit__"] = True
    assert apply_shared(shared, panel, controller) is False


def test_push_panel(panel):
    d = {}
    panel.set_value("velocity_y", 2.5)
    push_panel(d, panel)
    assert d == {"speed": 3.0, "damping": 0.5, "velocity_x": 0.0, "velocity_y": 2.5}


def test_status_line(panel, surface):
    from animation.controller import AnimationController

    controller = AnimationController(panel, surface)
    assert status_line(controller) == "idle"
    controller.start()
    controller.update(0.5)
    assert status_line(controller) == "forward running, elapsed 0.50s"
