"""Perpetual forward/backward spring animation with live retargeting."""
import logging

from .animator import SpringAnimator
from .core import IDENTITY
from .kinds import AnimationKind
from .parameters import spring_config
from .task import AnimationTask, Direction, TaskStatus

log = logging.getLogger(__name__)


class AnimationController:
    """
    Owns the animated object and the one current directional task.

    ``surface`` must expose ``track_width`` and ``square_size``; it is read
    each time a forward task is built so a resized surface is picked up.
    ``animator_factory`` returns a fresh animator for every task.
    """

    def __init__(self, panel, surface, animator_factory=SpringAnimator, kind=AnimationKind.TRANSLATE_X,
                 on_transform=None):
        self.panel = panel
        self.surface = surface
        self.animator_factory = animator_factory
        self.kind = kind
        self.on_transform = on_transform
        self.task_kind = kind  # kind of the current cycle; the backward leg reverses it
        self.transform = IDENTITY
        self.task = None
        self.active = None  # Direction of the current task, or None when idle
        self.history = []
        panel.subscribe(self.on_parameter_changed)

    @property
    def is_idle(self):
        return self.active is None

    @property
    def is_paused(self):
        return self.task is not None and self.task.status is TaskStatus.PAUSED

    def layout(self):
        """Host signal that the surface has a size; starts the cycle once."""
        if self.is_idle:
            self.start()

    def start(self):
        if not self.is_idle:
            return
        self._run(Direction.FORWARD)

    def stop(self):
        if self.task is not None:
            self.task.animator.stop()
        self.task = None
        self.active = None

    def set_kind(self, kind):
        """Takes effect when the next forward task is built."""
        if kind is not self.kind:
            log.info("animation kind %s -> %s", self.kind.label, kind.label)
            self.kind = kind

    def update(self, dt):
        if self.task is not None:
            self.task.animator.update(dt)

    def toggle_pause(self):
        if self.task is None:
            return
        if self.task.status is TaskStatus.PAUSED:
            self.task.animator.resume()
        else:
            self.task.animator.pause()

    def on_parameter_changed(self, parameter=None):
        """Pause the current task, rebuild its curve from the live parameters and continue in place."""
        if self.active is None:
            log.debug("parameter change while idle, nothing to retarget")
            return
        animator = self.task.animator
        held = animator.status is TaskStatus.PAUSED
        config = spring_config(self.panel)
        animator.pause()
        animator.resume(config)
        if held:
            animator.pause()
        log.debug("retargeted %s task (%s): %s", self.active.name,
                  parameter.name if parameter is not None else "-", config)

    def _target_for(self, direction):
        if direction is Direction.FORWARD:
            return self.kind.forward_target(self.surface.track_width, self.surface.square_size)
        return self.task_kind.backward_target(self.surface.track_width, self.surface.square_size)

    def _run(self, direction):
        if direction is Direction.FORWARD:
            self.task_kind = self.kind
        config = spring_config(self.panel)
        task = AnimationTask(direction, self.transform, self._target_for(direction), config,
                             self.animator_factory())
        self.task = task
        self.active = direction
        self.history.append(direction)
        log.debug("starting %s task %s -> %s over %.2fs", direction.name, task.start, task.target,
                  config.duration)
        task.run(on_tick=self._on_tick, on_complete=lambda: self._on_complete(task))

    def _on_tick(self, transform):
        self.transform = transform
        if self.on_transform is not None:
            self.on_transform(transform)

    def _on_complete(self, task):
        if task is not self.task:
            return
        log.debug("%s task completed", task.direction.name)
        self._run(task.direction.opposite)
