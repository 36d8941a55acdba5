import logging

from .core import Vec2
from .spring import SpringConfig

log = logging.getLogger(__name__)


class Parameter:
    """A named, bounded slider value. Assignments are clamped to [minimum, maximum]."""

    def __init__(self, name, label, default, minimum=0.0, maximum=1.0, fmt="%05.2f"):
        if minimum > maximum:
            raise ValueError(f"{name}: minimum {minimum} is greater than maximum {maximum}")
        if not minimum <= default <= maximum:
            raise ValueError(f"{name}: default {default} outside [{minimum}, {maximum}]")
        self.name = name
        self.label = label
        self.default = float(default)
        self.minimum = float(minimum)
        self.maximum = float(maximum)
        self.fmt = fmt
        self._value = self.default

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, value):
        self._value = self.clamp(value)

    def clamp(self, value):
        return min(self.maximum, max(self.minimum, float(value)))

    def format_value(self):
        return self.fmt % self._value

    def __repr__(self):
        return f"Parameter({self.name}={self._value:.3f} in [{self.minimum}, {self.maximum}])"


def default_parameters():
    """The slider set of the playground: speed, damping and initial velocity."""
    return [
        Parameter("speed", "Speed:", 3.0, minimum=0.3, maximum=6.0),
        Parameter("damping", "Damping:", 0.5, minimum=0.1),
        Parameter("velocity_x", "Velocity X:", 0.0, maximum=10.0),
        Parameter("velocity_y", "Velocity Y:", 0.0, maximum=10.0),
    ]


class ParameterPanel:
    def __init__(self, parameters=None):
        if parameters is None:
            parameters = default_parameters()
        self._parameters = {}
        for p in parameters:
            if p.name in self._parameters:
                raise ValueError(f"duplicate parameter name: {p.name}")
            self._parameters[p.name] = p
        self._listeners = []

    def __getitem__(self, name):
        return self._parameters[name].value

    def __contains__(self, name):
        return name in self._parameters

    def __iter__(self):
        return iter(self._parameters.values())

    def parameter(self, name):
        return self._parameters[name]

    def value(self, name):
        return self._parameters[name].value

    def values(self):
        return {name: p.value for name, p in self._parameters.items()}

    def subscribe(self, callback):
        """Register a change listener and call it once so it starts from a consistent state."""
        self._listeners.append(callback)
        callback(None)

    def unsubscribe(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def set_value(self, name, value):
        """Clamp and store a new value. Returns True when the stored value changed."""
        p = self._parameters[name]
        old = p.value
        p.value = value
        if p.value == old:
            return False
        log.debug("%s %s -> %s", name, old, p.format_value())
        self._notify(p)
        return True

    def reset(self):
        for p in list(self._parameters.values()):
            self.set_value(p.name, p.default)

    def _notify(self, parameter):
        for callback in list(self._listeners):
            callback(parameter)


def spring_config(panel):
    """Read the live slider values into a SpringConfig."""
    return SpringConfig(
        damping_ratio=panel["damping"],
        initial_velocity=Vec2(panel["velocity_x"], panel["velocity_y"]),
        duration=panel["speed"],
    )
