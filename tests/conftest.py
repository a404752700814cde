"""
Shared pytest fixtures for the dessert clicker tests.
"""

import pytest

from models.dessert import Dessert
from services.state import ClickerState


@pytest.fixture(autouse=True)
def reset_shared_holder():
    """Drop the shared ClickerState so tests don't leak state."""
    ClickerState._singleton = None
    yield
    ClickerState._singleton = None


@pytest.fixture
def small_catalog():
    """Three desserts: cupcake from 0, donut from 5, eclair from 10."""
    return (
        Dessert("Cupcake", 5, 0),
        Dessert("Donut", 10, 5),
        Dessert("Eclair", 15, 10),
    )


@pytest.fixture
def holder(small_catalog):
    return ClickerState(small_catalog)


class RecordingShareTarget:
    """ShareTarget double that records calls and reports a fixed outcome."""

    def __init__(self, handler_available=True):
        self.handler_available = handler_available
        self.shared = []
        self.notices = []

    def present_share_chooser(self, text):
        self.shared.append(text)
        return self.handler_available

    def show_notice(self, message):
        self.notices.append(message)


@pytest.fixture
def share_target():
    return RecordingShareTarget()


@pytest.fixture
def unavailable_share_target():
    return RecordingShareTarget(handler_available=False)
