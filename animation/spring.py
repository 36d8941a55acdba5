"""Closed-form damped spring timing curve.

Each axis is a damped harmonic oscillator on the normalized displacement
``x = 1 - progress``::

    x'' + 2 * zeta * omega * x' + omega**2 * x = 0

The natural frequency is chosen from the duration so the envelope has
decayed to ``SETTLE_EPSILON`` when the duration runs out; at that point the
curve snaps to progress 1. Initial velocity is expressed in progress units
per second (a velocity of 1 covers the whole distance in one second).

Because the solution is closed form, a curve can be rebuilt from any frozen
(progress, velocity) state, which is what pausing and retargeting rely on.
"""
from dataclasses import dataclass, field, replace
import math

from .core import Vec2

SETTLE_EPSILON = 1e-3
CRITICAL_TOLERANCE = 1e-6


@dataclass(frozen=True)
class SpringConfig:
    damping_ratio: float = 0.5
    initial_velocity: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    duration: float = 3.0

    def __post_init__(self):
        if self.damping_ratio <= 0:
            raise ValueError("damping_ratio must be > 0")
        if self.duration <= 0:
            raise ValueError("duration must be > 0")

    @property
    def natural_frequency(self):
        return -math.log(SETTLE_EPSILON) / (self.damping_ratio * self.duration)

    def with_duration(self, duration):
        return replace(self, duration=duration)


def _oscillator(zeta, omega, x0, v0):
    """Return f(t) -> (x, dx/dt) for one axis with x(0)=x0, x'(0)=v0."""
    if abs(zeta - 1.0) <= CRITICAL_TOLERANCE:
        a = x0
        b = v0 + omega * x0

        def critical(t):
            e = math.exp(-omega * t)
            return (a + b * t) * e, (b - omega * (a + b * t)) * e
        return critical

    if zeta < 1.0:
        decay = zeta * omega
        wd = omega * math.sqrt(1.0 - zeta * zeta)
        a = x0
        b = (v0 + decay * x0) / wd

        def under(t):
            e = math.exp(-decay * t)
            c = math.cos(wd * t)
            s = math.sin(wd * t)
            x = e * (a * c + b * s)
            dx = e * ((b * wd - decay * a) * c - (a * wd + decay * b) * s)
            return x, dx
        return under

    root = math.sqrt(zeta * zeta - 1.0)
    r1 = -omega * (zeta - root)
    r2 = -omega * (zeta + root)
    c2 = (v0 - r1 * x0) / (r2 - r1)
    c1 = x0 - c2

    def over(t):
        e1 = math.exp(r1 * t)
        e2 = math.exp(r2 * t)
        return c1 * e1 + c2 * e2, r1 * c1 * e1 + r2 * c2 * e2
    return over


class SpringCurve:
    """Progress of a spring animation as a function of elapsed task time.

    ``start_time`` is the elapsed time at which this curve takes over;
    ``progress`` and ``velocity`` are the per-axis state at that moment.
    """

    def __init__(self, config, progress=None, velocity=None, start_time=0.0):
        self.config = config
        self.start_time = float(start_time)
        self.progress0 = progress.copy() if progress is not None else Vec2(0.0, 0.0)
        self.velocity0 = velocity.copy() if velocity is not None else config.initial_velocity.copy()
        omega = config.natural_frequency
        zeta = config.damping_ratio
        # displacement x = 1 - progress, so its derivative is -velocity
        self._axes = (
            _oscillator(zeta, omega, 1.0 - self.progress0.x, -self.velocity0.x),
            _oscillator(zeta, omega, 1.0 - self.progress0.y, -self.velocity0.y),
        )

    @classmethod
    def from_state(cls, config, progress, velocity, elapsed):
        return cls(config, progress=progress, velocity=velocity, start_time=elapsed)

    @property
    def duration(self):
        return self.config.duration

    def is_done(self, elapsed):
        return elapsed >= self.config.duration

    def evaluate(self, elapsed):
        """Return (progress, velocity) as Vec2s at ``elapsed`` seconds into the task."""
        if self.is_done(elapsed):
            return Vec2(1.0, 1.0), Vec2(0.0, 0.0)
        t = max(0.0, elapsed - self.start_time)
        x, dx = self._axes[0](t)
        y, dy = self._axes[1](t)
        return Vec2(1.0 - x, 1.0 - y), Vec2(-dx, -dy)

    def progress(self, elapsed):
        return self.evaluate(elapsed)[0]

    def __repr__(self):
        return (f"<SpringCurve zeta={self.config.damping_ratio:.2f} "
                f"duration={self.config.duration:.2f} from t={self.start_time:.2f}>")
