from enum import Enum, auto


class Direction(Enum):
    FORWARD = auto()
    BACKWARD = auto()

    @property
    def opposite(self):
        return Direction.BACKWARD if self is Direction.FORWARD else Direction.FORWARD


class TaskStatus(Enum):
    PENDING = auto()
    RUNNING = auto()
    PAUSED = auto()
    COMPLETED = auto()


class AnimationTask:
    """One leg of the oscillation: animates the object from ``start`` to ``target``."""

    def __init__(self, direction, start, target, config, animator):
        self.direction = direction
        self.start = start
        self.target = target
        self.animator = animator
        self._config = config

    @property
    def config(self):
        # the animator holds the most recent curve after a retarget
        curve = self.animator.curve
        return curve.config if curve is not None else self._config

    @property
    def status(self):
        return self.animator.status

    @property
    def is_running(self):
        return self.animator.status is TaskStatus.RUNNING

    def run(self, on_tick=None, on_complete=None):
        self.animator.start(self._config, self.start, self.target, on_tick=on_tick, on_complete=on_complete)

    def __repr__(self):
        return f"<AnimationTask {self.direction.name} {self.status.name} -> {self.target}>"
