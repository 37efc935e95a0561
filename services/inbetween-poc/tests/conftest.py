"""Shared fixtures for the inbetween service tests."""
import sys
from pathlib import Path
import pytest

SERVICE_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(SERVICE_ROOT))

from inbetween.config import TweenSettings
from inbetween.animate.ingestion.models import Drawing, HSBColor, Point, Stroke


class FakeTime:
    """Monotonic time source the tests move by hand, counted in whole ms."""

    def __init__(self):
        self.ms = 0

    def __call__(self) -> float:
        return self.ms / 1000.0

    def advance_ms(self, ms: int) -> None:
        self.ms += ms


def make_stroke(coords, h=0.0, thickness=4.0, opacity=100.0, eraser=False):
    return Stroke(
        color=HSBColor(h=h, s=50.0, b=50.0, a=100.0),
        thickness=thickness,
        opacity=opacity,
        eraser=eraser,
        points=[Point(x=x, y=y) for x, y in coords],
    )


@pytest.fixture
def settings():
    return TweenSettings()


@pytest.fixture
def fake_time():
    return FakeTime()


@pytest.fixture
def line_stroke():
    return make_stroke([(0, 0), (10, 0), (30, 0)])


@pytest.fixture
def keyframes():
    first = Drawing(strokes=[
        make_stroke([(0, 0), (100, 0)], h=0.0),
        make_stroke([(0, 50), (100, 50)], h=120.0),
    ])
    second = Drawing(strokes=[
        make_stroke([(0, 10), (100, 10)], h=60.0),
        make_stroke([(0, 60), (100, 60)], h=180.0),
    ])
    third = Drawing(strokes=[
        make_stroke([(0, 20), (100, 20)], h=90.0),
    ])
    return [first, second, third]
