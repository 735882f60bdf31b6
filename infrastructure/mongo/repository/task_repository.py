import re
from dataclasses import replace
from typing import Any

from pymongo import ReturnDocument
from pymongo.collection import Collection

from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository
from infrastructure.mongo.models.task import TaskMongo
from infrastructure.mongo.session.client import get_db

_SEQUENCE_NAME = "tasks"


class MongoTaskRepository(TaskRepository):
    """
    Implementación de TaskRepository usando MongoDB (Synchronous).

    Los ids son enteros secuenciales obtenidos de la colección `counters`.
    """

    def __init__(self) -> None:
        self.db = get_db()
        self.collection: Collection[Any] = self.db.tasks
        self.counters: Collection[Any] = self.db.counters

    def _next_id(self) -> int:
        counter = self.counters.find_one_and_update(
            {"_id": _SEQUENCE_NAME},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(counter["seq"])

    def save(self, task: Task) -> Task:
        """
        Inserta la tarea (asignando un id nuevo) o reemplaza la existente.

        Argumentos:
            task (Task): La tarea a guardar.

        Retorna:
            Task: La tarea guardada, con su id.
        """
        stored = task if task.id is not None else replace(task, id=self._next_id())
        task_dict = TaskMongo.from_domain(stored).model_dump(by_alias=True)
        created_at = task_dict.pop("created_at")

        self.collection.update_one(
            {"_id": task_dict["_id"]},
            {"$set": task_dict, "$setOnInsert": {"created_at": created_at}},
            upsert=True,
        )
        return replace(stored)

    def find_by_id(self, task_id: int) -> Task | None:
        """
        Obtiene una tarea por su ID.

        Retorna:
            Task | None: La tarea encontrada o None si no existe.
        """
        doc = self.collection.find_one({"_id": task_id})
        if not doc:
            return None

        return TaskMongo(**doc).to_domain()

    def find_all(self) -> list[Task]:
        docs = self.collection.find().sort("_id", 1)
        return [TaskMongo(**doc).to_domain() for doc in docs]

    def delete_by_id(self, task_id: int) -> None:
        self.collection.delete_one({"_id": task_id})

    def exists_by_id(self, task_id: int) -> bool:
        return self.collection.count_documents({"_id": task_id}, limit=1) > 0

    def find_by_status(self, status: TaskStatus) -> list[Task]:
        docs = self.collection.find({"status": status.value}).sort("_id", 1)
        return [TaskMongo(**doc).to_domain() for doc in docs]

    def find_by_title_containing(self, keyword: str) -> list[Task]:
        query = {"title": {"$regex": re.escape(keyword), "$options": "i"}}
        docs = self.collection.find(query).sort("_id", 1)
        return [TaskMongo(**doc).to_domain() for doc in docs]
