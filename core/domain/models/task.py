from dataclasses import dataclass
from datetime import datetime
from enum import Enum

DESCRIPTION_MAX_LENGTH = 1000


class TaskStatus(Enum):
    """
    Estados posibles de una tarea.

    No hay grafo de transiciones: cualquier estado puede pasar a cualquier
    otro mediante una edición. Solo `mark_complete` tiene destino fijo (DONE).
    """

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


@dataclass(slots=True)
class Task:
    title: str
    id: int | None = None
    description: str | None = None
    status: TaskStatus = TaskStatus.TODO
    due_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
