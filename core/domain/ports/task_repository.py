from abc import ABC, abstractmethod

from core.domain.models.task import Task, TaskStatus


class TaskRepository(ABC):
    @abstractmethod
    def save(self, task: Task) -> Task:
        """Inserta (asignando `id`) o reemplaza la tarea y la devuelve."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, task_id: int) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, task_id: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def exists_by_id(self, task_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    def find_by_status(self, status: TaskStatus) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def find_by_title_containing(self, keyword: str) -> list[Task]:
        """Búsqueda por subcadena en el título, sin distinguir mayúsculas."""
        raise NotImplementedError
