"""Glue between the control-window process and the animation.

The control window only writes plain values into a ``Manager().dict()``;
the render loop applies them here once per frame, on its own thread.
"""
import logging

from .kinds import AnimationKind
from .parameters import default_parameters

log = logging.getLogger(__name__)


def seed_shared(shared, parameters=None):
    """Put the initial slider values and flags into the shared dict."""
    if parameters is None:
        parameters = default_parameters()
    for p in parameters:
        shared[p.name] = p.value
    shared['kind'] = AnimationKind.TRANSLATE_X.label
    shared['toggle_pause'] = False
    shared['reset_parameters'] = False
    shared['status'] = ''
    shared['__exit__'] = False


def push_panel(shared, panel):
    """Write the panel's values back so the control window follows."""
    for p in panel:
        shared[p.name] = p.value


def apply_shared(shared, panel, controller):
    """
    Apply what the control window wrote since the last frame.
    Returns False once the control window asked to exit.
    """
    for p in panel:
        raw = shared.get(p.name)
        if raw is None:
            continue
        try:
            value = float(raw)
        except (TypeError, ValueError):
            log.warning("ignoring non-numeric value %r for %s", raw, p.name)
            continue
        panel.set_value(p.name, value)

    kind = shared.get('kind')
    if kind is not None:
        try:
            controller.set_kind(AnimationKind.from_label(kind))
        except ValueError:
            log.warning("ignoring unknown animation kind %r", kind)

    if shared.get('reset_parameters', False):
        shared['reset_parameters'] = False
        log.info("resetting parameters to defaults")
        panel.reset()
        push_panel(shared, panel)

    if shared.get('toggle_pause', False):
        shared['toggle_pause'] = False
        controller.toggle_pause()

    return not shared.get('__exit__', False)


def status_line(controller):
    if controller.task is None:
        return "idle"
    return (f"{controller.active.name.lower()} {controller.task.status.name.lower()}, "
            f"elapsed {controller.task.animator.elapsed:.2f}s")
