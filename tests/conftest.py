import importlib
import os
import sys
import pytest

os.environ.setdefault('MPLBACKEND', 'Agg')

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

providers = importlib.import_module('curtailment.providers')
CurtailmentStore = importlib.import_module('curtailment.core.store').CurtailmentStore


class FakeClock:
    """Manually advanced clock returning plain numbers."""

    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def table():
    return providers.get('vestas')

@pytest.fixture
def clock():
    return FakeClock(now=1000)

@pytest.fixture
def store(table, clock):
    return CurtailmentStore(table, clock=clock)
