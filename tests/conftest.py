import random
import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `forest_fire.*`.

    This repo uses the common `src/` layout but is not necessarily installed as a package
    in the active environment.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


class ConstantRandom:
    """Random source that always returns the same draw and counts calls."""

    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


class ScriptedRandom:
    """Random source that replays a fixed list of draws."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = 0

    def random(self) -> float:
        value = self.draws[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def constant_random():
    return ConstantRandom


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture
def seeded_random():
    """A reproducible ``random.Random``."""
    return random.Random(1234)
