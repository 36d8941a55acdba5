from enum import Enum

from .core import IDENTITY, Transform

MAXIMUM_SCALE = 2.0


def centre_offset(track_width, square_size):
    """Translation that takes the left-anchored square to the middle of the track."""
    return max(0.0, track_width - square_size) / 2.0


class AnimationKind(Enum):
    """What the forward leg does to the square. Values follow the selector order.

    The square is always drawn from the track's left edge; where a kind needs
    it centred the offset is part of the target, so switching kinds slides the
    square along the spring curve instead of snapping it.
    """

    TRANSLATE_X = 0
    SCALE = 1

    @property
    def label(self):
        return "Translate X" if self is AnimationKind.TRANSLATE_X else "Scale"

    @classmethod
    def from_label(cls, label):
        for kind in cls:
            if kind.label == label:
                return kind
        raise ValueError(f"unknown animation kind: {label!r}")

    def forward_target(self, track_width, square_size):
        if self is AnimationKind.TRANSLATE_X:
            return Transform.translation(max(0.0, track_width - square_size))
        return Transform(tx=centre_offset(track_width, square_size), sx=MAXIMUM_SCALE, sy=MAXIMUM_SCALE)

    def backward_target(self, track_width, square_size):
        if self is AnimationKind.TRANSLATE_X:
            return IDENTITY
        return Transform.translation(centre_offset(track_width, square_size))
