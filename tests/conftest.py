import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from animation.parameters import ParameterPanel


class FakeSurface:
    """Stands in for the pygame track view: only the geometry the controller reads."""

    def __init__(self, track_width=395, square_size=50):
        self.track_width = track_width
        self.square_size = square_size


@pytest.fixture
def panel():
    return ParameterPanel()


@pytest.fixture
def surface():
    return FakeSurface()
