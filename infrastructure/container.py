import os

from core.application.task_engine import TaskEngine
from core.application.url_strategy_registry import UrlStrategyRegistry
from core.domain.ports.task_repository import TaskRepository
from infrastructure.browser.strategies import default_strategies
from infrastructure.mongo.repository.task_repository import MongoTaskRepository
from infrastructure.peewee.repository.task_repository import (
    PeeweeTaskRepository,
)
from infrastructure.sqlalchemy.repository.task_repository import (
    SqlAlchemyTaskRepository,
)


def get_task_repository() -> TaskRepository:
    orm = os.getenv("ORM", "peewee").lower()

    if orm == "mongo":
        return MongoTaskRepository()
    elif orm == "sqlalchemy":
        return SqlAlchemyTaskRepository()
    # Default to Peewee
    return PeeweeTaskRepository()


def get_task_engine() -> TaskEngine:
    return TaskEngine(repository=get_task_repository())


def get_url_strategy_registry() -> UrlStrategyRegistry:
    return UrlStrategyRegistry(default_strategies())
