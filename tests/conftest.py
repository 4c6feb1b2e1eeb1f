"""Pytest configuration and fixtures for test suite."""

import itertools
import random

import pytest
from fastapi.testclient import TestClient

from core.event_hub import event_hub
from core.service_manager import get_controller
from core.services.monitor_controller import MonitorController
from main import app


class StepClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: float = 1000.0):
        self._counter = itertools.count(start)

    def __call__(self) -> float:
        return float(next(self._counter))


@pytest.fixture(autouse=True)
def clean_event_hub():
    """Drop any subscriber a test registered on the global hub."""
    yield
    event_hub.unsubscribe_all()
    event_hub.init(None)


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def controller(clock):
    """Isolated controller with a seeded simulator and a step clock."""
    return MonitorController(rng=random.Random(42), clock=clock)


@pytest.fixture
def client(controller):
    """Test client whose routes operate on the isolated controller.

    The lifespan is not entered, so no background ticking happens.
    """
    app.dependency_overrides[get_controller] = lambda: controller
    yield TestClient(app)
    app.dependency_overrides.clear()


def tick_until(controller: MonitorController, condition, limit: int = 200) -> int:
    """Tick until condition(controller) holds; returns the number of ticks."""
    for n in range(1, limit + 1):
        controller.tick()
        if condition(controller):
            return n
    raise AssertionError(f"Condition not reached within {limit} ticks")
