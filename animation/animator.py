"""Frame-driven spring animator.

Stands in for the host's property animator: it is advanced by the render
loop through ``update(dt)`` and supports pausing (freezing progress and
velocity) and resuming on a curve rebuilt from that frozen state.
"""
import logging

from .core import IDENTITY
from .spring import SpringCurve
from .task import TaskStatus

log = logging.getLogger(__name__)


class AnimatorStateError(RuntimeError):
    pass


class SpringAnimator:
    def __init__(self):
        self.status = TaskStatus.PENDING
        self.curve = None
        self.elapsed = 0.0
        self.start_transform = IDENTITY
        self.target = IDENTITY
        self.transform = IDENTITY
        self.progress = None
        self.velocity = None
        self._on_tick = None
        self._on_complete = None

    @property
    def is_running(self):
        return self.status is TaskStatus.RUNNING

    @property
    def remaining(self):
        if self.curve is None:
            return 0.0
        return max(0.0, self.curve.duration - self.elapsed)

    def start(self, config, start, target, on_tick=None, on_complete=None):
        if self.status is not TaskStatus.PENDING:
            raise AnimatorStateError(f"cannot start an animator that is {self.status.name}")
        self.curve = SpringCurve(config)
        self.elapsed = 0.0
        self.start_transform = start
        self.target = target
        self.progress, self.velocity = self.curve.evaluate(0.0)
        self.transform = start.interpolate(target, self.progress)
        self._on_tick = on_tick
        self._on_complete = on_complete
        self.status = TaskStatus.RUNNING

    def update(self, dt):
        if self.status is not TaskStatus.RUNNING:
            return
        self.elapsed += dt
        self.progress, self.velocity = self.curve.evaluate(self.elapsed)
        if self.curve.is_done(self.elapsed):
            self.transform = self.target.copy()
        else:
            self.transform = self.start_transform.interpolate(self.target, self.progress)
        if self._on_tick is not None:
            self._on_tick(self.transform)
        if self.curve.is_done(self.elapsed):
            self._finish()

    def pause(self):
        """Freeze in place and return the (progress, velocity) to continue from."""
        if self.status is TaskStatus.RUNNING:
            self.status = TaskStatus.PAUSED
        elif self.status is not TaskStatus.PAUSED:
            raise AnimatorStateError(f"cannot pause an animator that is {self.status.name}")
        return self.progress.copy(), self.velocity.copy()

    def resume(self, config=None):
        """Continue from the frozen state; a new config replaces the curve, keeping the remaining time."""
        if self.status is not TaskStatus.PAUSED:
            raise AnimatorStateError(f"cannot resume an animator that is {self.status.name}")
        if config is not None:
            config = config.with_duration(self.curve.duration)
            self.curve = SpringCurve.from_state(config, self.progress, self.velocity, self.elapsed)
        self.status = TaskStatus.RUNNING

    def stop(self):
        """Discard without firing the completion callback."""
        self.status = TaskStatus.COMPLETED
        self._on_tick = None
        self._on_complete = None

    def _finish(self):
        self.status = TaskStatus.COMPLETED
        on_complete = self._on_complete
        self._on_tick = None
        self._on_complete = None
        if on_complete is not None:
            on_complete()
