from datetime import datetime

from core.application.clock import Clock
from core.application.complete_task import CompleteTaskUseCase
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksCommand, ListTasksUseCase
from core.application.search_tasks import SearchTasksCommand, SearchTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository


class TaskEngine:
    """
    Fachada sobre los casos de uso de tareas.

    Es el único punto de escritura en el repositorio: la consola y cualquier
    otro cliente pasan por aquí para que se respeten las invariantes.

    Raises (según la operación):
        TaskValidationError: título vacío o descripción demasiado larga.
        TaskNotFoundError: id inexistente en update/delete/mark_complete.
    """

    def __init__(
        self, repository: TaskRepository, clock: Clock = datetime.now
    ) -> None:
        self._create = CreateTaskUseCase(repository, clock)
        self._get = GetTaskUseCase(repository)
        self._list = ListTasksUseCase(repository)
        self._search = SearchTasksUseCase(repository)
        self._update = UpdateTaskUseCase(repository, clock)
        self._delete = DeleteTaskUseCase(repository)
        self._complete = CompleteTaskUseCase(repository, clock)

    def create(self, cmd: CreateTaskCommand) -> Task:
        return self._create.execute(cmd)

    def get_by_id(self, task_id: int) -> Task | None:
        return self._get.execute(task_id)

    def list_all(self) -> list[Task]:
        return self._list.execute()

    def list_by_status(self, status: TaskStatus) -> list[Task]:
        return self._list.execute(ListTasksCommand(status=status))

    def search_by_title(self, keyword: str) -> list[Task]:
        return self._search.execute(SearchTasksCommand(keyword=keyword))

    def update(self, task_id: int, cmd: UpdateTaskCommand) -> Task:
        return self._update.execute(task_id, cmd)

    def delete(self, task_id: int) -> None:
        self._delete.execute(DeleteTaskCommand(id=task_id))

    def mark_complete(self, task_id: int) -> Task:
        return self._complete.execute(task_id)
