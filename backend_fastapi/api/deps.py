from core.application.task_engine import TaskEngine
from infrastructure.container import get_task_engine


def task_engine() -> TaskEngine:
    return get_task_engine()
