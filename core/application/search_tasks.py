from dataclasses import dataclass

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class SearchTasksCommand:
    keyword: str


class SearchTasksUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: SearchTasksCommand) -> list[Task]:
        # La cadena vacía coincide con todas las tareas.
        return self._repository.find_by_title_containing(cmd.keyword)
