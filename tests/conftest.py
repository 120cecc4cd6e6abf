"""
Pytest configuration and shared fixtures for requestgate tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

import importlib

_common = importlib.import_module("fixtures.common")

FakeClock = _common.FakeClock
make_session = _common.make_session

from requestgate.config.runtime import RuntimeConfig, set_default_config
from requestgate.http.factory import create_client
from requestgate.throttle.controller import ThrottleController


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def clock():
    """A fake clock starting at t=1000s."""
    return FakeClock()


@pytest.fixture
def controller(clock):
    """A ThrottleController with a 300ms window on the fake clock."""
    return ThrottleController(window=0.3, clock=clock)


@pytest.fixture
def session():
    """A Mock requests session returning 200 OK."""
    return make_session()


@pytest.fixture
def runtime_config():
    """Runtime config pointing at a fake API."""
    return RuntimeConfig.from_dict({
        "http": {"base_url": "https://api.example.com/v1"},
        "throttle": {"enabled": True, "window_ms": 300},
    })


@pytest.fixture
def client(runtime_config, clock, session):
    """A throttled client wired to the fake clock and Mock session."""
    c = create_client(runtime_config, clock=clock, session=session)
    yield c
    c.close()


@pytest.fixture(autouse=True)
def _reset_default_config():
    """Keep the process-wide default config from leaking between tests."""
    set_default_config(None)
    yield
    set_default_config(None)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
