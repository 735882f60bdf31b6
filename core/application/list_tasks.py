from dataclasses import dataclass

from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class ListTasksCommand:
    status: TaskStatus | None = None


class ListTasksUseCase:
    """Lista todas las tareas, o solo las de un estado si el comando lo indica."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: ListTasksCommand | None = None) -> list[Task]:
        if cmd is None or cmd.status is None:
            return self._repository.find_all()
        return self._repository.find_by_status(cmd.status)
