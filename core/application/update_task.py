import logging
from dataclasses import dataclass
from datetime import datetime

from core.application.clock import Clock, next_timestamp
from core.domain.errors import TaskNotFoundError
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository
from core.domain.validation import validate_task_fields

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateTaskCommand:
    """
    Reemplazo completo de los campos editables.

    Los campos omitidos toman su valor por defecto: no se conservan los de la
    tarea almacenada.
    """

    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.TODO
    due_date: datetime | None = None


class UpdateTaskUseCase:
    def __init__(
        self, repository: TaskRepository, clock: Clock = datetime.now
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self, task_id: int, cmd: UpdateTaskCommand) -> Task:
        task = self._repository.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        validate_task_fields(cmd.title, cmd.description, cmd.status)

        task.title = cmd.title
        task.description = cmd.description
        task.status = cmd.status
        task.due_date = cmd.due_date
        task.updated_at = next_timestamp(self._clock, task.updated_at)

        updated = self._repository.save(task)
        logger.info(f"Task {task_id} updated ({updated.status.value})")
        return updated
