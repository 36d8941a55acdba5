import logging
import time

import dearpygui.dearpygui as dpg

from animation.kinds import AnimationKind
from animation.parameters import default_parameters
from animation.shared import seed_shared
from constants import PARAMETER_FORMAT

log = logging.getLogger(__name__)


def _make_callbacks(shared):
    def slider_cb(sender, app_data, user_data):
        shared[user_data] = float(app_data)
    def kind_cb(sender, app_data, user_data):
        shared['kind'] = str(app_data)
    def pause_cb():
        shared['toggle_pause'] = True
    def reset_cb():
        shared['reset_parameters'] = True
    def exit_cb():
        shared['__exit__'] = True
    return slider_cb, kind_cb, pause_cb, reset_cb, exit_cb


def run_gui(shared, parameters=None):
    """
    Run DearPyGui in its own process. Writes slider values into `shared`;
    the pygame process reads them once per frame.
    """
    if parameters is None:
        parameters = default_parameters()

    dpg.create_context()

    slider_cb, kind_cb, pause_cb, reset_cb, exit_cb = _make_callbacks(shared)

    with dpg.window(label="Spring Controls", tag="controls_window", width=380, height=320):
        dpg.add_text("Animation")
        dpg.add_radio_button([k.label for k in AnimationKind], tag="kind_radio", horizontal=True,
                             default_value=shared.get('kind', AnimationKind.TRANSLATE_X.label), callback=kind_cb)
        dpg.add_separator()
        for p in parameters:
            dpg.add_slider_float(label=p.label, tag=f"{p.name}_slider", user_data=p.name,
                                 default_value=float(shared.get(p.name, p.default)),
                                 min_value=p.minimum, max_value=p.maximum, format=PARAMETER_FORMAT,
                                 callback=slider_cb)
        dpg.add_separator()
        with dpg.group(horizontal=True):
            dpg.add_button(label="Pause / Resume", callback=lambda s, a, u: pause_cb())
            dpg.add_button(label="Reset", callback=lambda s, a, u: reset_cb())
            dpg.add_button(label="Exit", callback=lambda s, a, u: exit_cb())
        dpg.add_spacer()
        dpg.add_text("Status:", tag="status_label")
        dpg.add_text("", tag="status_text")

    dpg.create_viewport(title='Spring Controls', width=400, height=340)
    dpg.set_primary_window("controls_window", True)
    dpg.setup_dearpygui()
    dpg.show_viewport()

    try:
        while not shared.get('__exit__', False) and dpg.is_dearpygui_running():
            # the main process may change values (reset), keep the widgets in step
            for p in parameters:
                tag = f"{p.name}_slider"
                value = shared.get(p.name)
                if value is not None and dpg.get_value(tag) != value:
                    dpg.set_value(tag, float(value))
            kind = shared.get('kind')
            if kind is not None and dpg.get_value("kind_radio") != kind:
                dpg.set_value("kind_radio", kind)
            dpg.set_value("status_text", shared.get('status', ''))

            dpg.render_dearpygui_frame()
            time.sleep(0.01)
    finally:
        dpg.destroy_context()
        log.info("control window closed")


if __name__ == "__main__":
    from multiprocessing import Manager
    mgr = Manager()
    shared = mgr.dict()
    seed_shared(shared)
    run_gui(shared)
