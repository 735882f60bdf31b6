from dataclasses import replace
from typing import List

from peewee import fn

from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.session.db import IS_SQLITE, db, init_db


def _to_domain(model: TaskModel) -> Task:
    return Task(
        id=model.id,
        title=model.title,
        description=model.description,
        status=TaskStatus(model.status),
        due_date=model.due_date,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class PeeweeTaskRepository(TaskRepository):
    def __init__(self):
        # Tables are created on init; there are no migrations in this project.
        init_db([TaskModel])

    def save(self, task: Task) -> Task:
        with db.atomic():
            if task.id is not None:
                updated = (
                    TaskModel.update(
                        title=task.title,
                        description=task.description,
                        status=task.status.value,
                        due_date=task.due_date,
                        updated_at=task.updated_at,
                    )
                    .where(TaskModel.id == task.id)
                    .execute()
                )
                if updated:
                    return replace(task)

            model = TaskModel.create(
                title=task.title,
                description=task.description,
                status=task.status.value,
                due_date=task.due_date,
                created_at=task.created_at,
                updated_at=task.updated_at,
            )
            return replace(task, id=model.id)

    def find_by_id(self, task_id: int) -> Task | None:
        try:
            return _to_domain(TaskModel.get(TaskModel.id == task_id))
        except TaskModel.DoesNotExist:
            return None

    def find_all(self) -> List[Task]:
        return [_to_domain(t) for t in TaskModel.select().order_by(TaskModel.id)]

    def delete_by_id(self, task_id: int) -> None:
        query = TaskModel.delete().where(TaskModel.id == task_id)
        query.execute()

    def exists_by_id(self, task_id: int) -> bool:
        return TaskModel.select().where(TaskModel.id == task_id).exists()

    def find_by_status(self, status: TaskStatus) -> List[Task]:
        query = (
            TaskModel.select()
            .where(TaskModel.status == status.value)
            .order_by(TaskModel.id)
        )
        return [_to_domain(t) for t in query]

    def find_by_title_containing(self, keyword: str) -> List[Task]:
        if IS_SQLITE:
            condition = fn.casefold(TaskModel.title).contains(keyword.casefold())
        else:
            # ILIKE en Postgres.
            condition = TaskModel.title.contains(keyword)
        query = (
            TaskModel.select()
            .where(condition)
            .order_by(TaskModel.id)
        )
        return [_to_domain(t) for t in query]
