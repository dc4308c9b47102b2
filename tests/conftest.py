import random
import sys
from pathlib import Path

import pytest

# Ensure the repository root is on sys.path for test imports without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from engine import GameEngine  # noqa: E402
from generator import ContentGenerator  # noqa: E402


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def engine(rng):
    return GameEngine(rng=rng)


@pytest.fixture
def generator(rng):
    return ContentGenerator(rng, item_find_threshold=0.6)
