import logging
from datetime import datetime

from core.application.clock import Clock, next_timestamp
from core.domain.errors import TaskNotFoundError
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class CompleteTaskUseCase:
    """
    Marca una tarea como DONE sea cual sea su estado previo.

    Es idempotente: completar una tarea ya completada no es un error.
    """

    def __init__(
        self, repository: TaskRepository, clock: Clock = datetime.now
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self, task_id: int) -> Task:
        task = self._repository.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        task.status = TaskStatus.DONE
        task.updated_at = next_timestamp(self._clock, task.updated_at)

        completed = self._repository.save(task)
        logger.info(f"Task {task_id} marked as DONE")
        return completed
