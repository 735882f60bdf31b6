import os

# Use memory databases for tests; must be set before the session modules load.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ.setdefault("ORM", "peewee")

import pytest

from core.application.task_engine import TaskEngine
from core.application.url_strategy_registry import UrlStrategyRegistry
from fakes import FixedClock, InMemoryTaskRepository
from infrastructure.browser.strategies import default_strategies


@pytest.fixture
def repo() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def engine(repo, clock) -> TaskEngine:
    return TaskEngine(repo, clock=clock)


@pytest.fixture
def registry() -> UrlStrategyRegistry:
    return UrlStrategyRegistry(default_strategies())
