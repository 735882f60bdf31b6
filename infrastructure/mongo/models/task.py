from datetime import datetime

from pydantic import BaseModel, Field

from core.domain.models.task import Task, TaskStatus


class TaskMongo(BaseModel):
    """
    Modelo de Task para MongoDB.
    Representa cómo se almacena la tarea en la colección `tasks`.
    """

    id: int = Field(alias="_id")
    title: str
    description: str | None = None
    status: str
    due_date: datetime | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"populate_by_name": True}

    def to_domain(self) -> Task:
        """
        Convierte el documento de MongoDB al modelo de dominio.

        Retorna:
            Task: La entidad de dominio.
        """
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            status=TaskStatus(self.status),
            due_date=self.due_date,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    @classmethod
    def from_domain(cls, task: Task) -> "TaskMongo":
        """
        Crea una instancia de TaskMongo a partir de una entidad con id asignado.

        Argumentos:
            task (Task): La entidad de dominio.

        Retorna:
            TaskMongo: El documento de MongoDB.
        """
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status.value,
            due_date=task.due_date,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )
