import logging
from dataclasses import dataclass
from datetime import datetime

from core.application.clock import Clock, next_timestamp
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository
from core.domain.validation import validate_task_fields

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateTaskCommand:
    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.TODO
    due_date: datetime | None = None


class CreateTaskUseCase:
    def __init__(
        self, repository: TaskRepository, clock: Clock = datetime.now
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self, cmd: CreateTaskCommand) -> Task:
        validate_task_fields(cmd.title, cmd.description, cmd.status)

        now = next_timestamp(self._clock)
        task = Task(
            title=cmd.title,
            description=cmd.description,
            status=cmd.status,
            due_date=cmd.due_date,
            created_at=now,
            updated_at=now,
        )
        stored = self._repository.save(task)
        logger.info(f"Task {stored.id} created ({stored.status.value})")
        return stored
