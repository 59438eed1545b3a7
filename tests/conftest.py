import random
import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `wildfire.*`.

    This repo uses the common `src/` layout but is not necessarily installed as a package
    in the active environment.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


class ScriptedRandom:
    """Random source replaying fixed sequences of draws.

    Running out of scripted values raises IndexError, which makes an
    unexpected draw fail the test.
    """

    def __init__(self, floats=(), ints=()):
        self.floats = list(floats)
        self.ints = list(ints)
        self.randrange_calls = 0

    def random(self) -> float:
        return self.floats.pop(0)

    def randrange(self, stop: int) -> int:
        self.randrange_calls += 1
        value = self.ints.pop(0)
        assert 0 <= value < stop
        return value


class RecordingRenderer:
    """Renderer that keeps everything it is handed."""

    def __init__(self):
        self.frames = []
        self.reports = []
        self.results = []

    def render(self, grid, cycle):
        self.frames.append((cycle, grid.copy()))

    def report_step(self, report):
        self.reports.append(report)

    def finish(self, result):
        self.results.append(result)


@pytest.fixture
def scripted():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def recorder():
    return RecordingRenderer()


@pytest.fixture
def rng():
    """Seeded generator for reproducible random tests."""
    return random.Random(1234)
