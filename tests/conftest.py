"""
Pytest fixtures for tests.

Time-dependent components take a ``clock`` callable, so tests drive them with
``FakeClock`` instead of sleeping.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from voidstats.cache import StatsCache
from voidstats.controller import VoidController
from voidstats.cooldowns import CooldownTracker


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fetch():
    """Upstream fetch returning an empty Bed Wars object."""
    return AsyncMock(return_value={})


@pytest.fixture
def cache(fetch, clock):
    return StatsCache(fetch, clock=clock)


@pytest.fixture
def cooldowns(clock):
    return CooldownTracker(clock=clock)


@pytest.fixture
def controller(cache, cooldowns):
    return VoidController(cache, cooldowns)


def make_ctx(user_id: int = 42):
    """Create a mock slash command context."""
    ctx = MagicMock()
    ctx.author.id = user_id
    ctx.command.name = "void"
    ctx.respond = AsyncMock()
    ctx.defer = AsyncMock()
    ctx.edit = AsyncMock()
    return ctx


def make_interaction(response_done: bool = False):
    """Create a mock component interaction."""
    interaction = MagicMock()
    interaction.response.edit_message = AsyncMock()
    interaction.response.send_message = AsyncMock()
    interaction.response.is_done = MagicMock(return_value=response_done)
    interaction.followup.send = AsyncMock()
    return interaction


@pytest.fixture
def ctx():
    return make_ctx()


@pytest.fixture
def interaction():
    return make_interaction()
