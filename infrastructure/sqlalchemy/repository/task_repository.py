from dataclasses import replace

from sqlalchemy import func

from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository
from infrastructure.sqlalchemy.session.db import IS_SQLITE, get_session, init_db
from infrastructure.sqlalchemy.model.models import TaskModel


def _to_domain(task_model: TaskModel) -> Task:
    return Task(
        id=task_model.id,
        title=task_model.title,
        description=task_model.description,
        status=TaskStatus(task_model.status),
        due_date=task_model.due_date,
        created_at=task_model.created_at,
        updated_at=task_model.updated_at,
    )


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self) -> None:
        init_db()

    def save(self, task: Task) -> Task:
        session = get_session()
        try:
            task_model = None
            if task.id is not None:
                task_model = session.get(TaskModel, task.id)

            if task_model is None:
                task_model = TaskModel(created_at=task.created_at)
                session.add(task_model)

            task_model.title = task.title
            task_model.description = task.description
            task_model.status = task.status.value
            task_model.due_date = task.due_date
            task_model.updated_at = task.updated_at

            session.commit()
            return replace(task, id=task_model.id)
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def find_by_id(self, task_id: int) -> Task | None:
        session = get_session()
        try:
            task_model = session.get(TaskModel, task_id)
            if task_model is None:
                return None
            return _to_domain(task_model)
        finally:
            session.close()

    def find_all(self) -> list[Task]:
        session = get_session()
        try:
            task_models = session.query(TaskModel).order_by(TaskModel.id).all()
            return [_to_domain(task_model) for task_model in task_models]
        finally:
            session.close()

    def delete_by_id(self, task_id: int) -> None:
        session = get_session()
        try:
            task_model = session.get(TaskModel, task_id)
            if task_model is None:
                return
            session.delete(task_model)
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def exists_by_id(self, task_id: int) -> bool:
        session = get_session()
        try:
            return session.get(TaskModel, task_id) is not None
        finally:
            session.close()

    def find_by_status(self, status: TaskStatus) -> list[Task]:
        session = get_session()
        try:
            task_models = (
                session.query(TaskModel)
                .filter(TaskModel.status == status.value)
                .order_by(TaskModel.id)
                .all()
            )
            return [_to_domain(task_model) for task_model in task_models]
        finally:
            session.close()

    def find_by_title_containing(self, keyword: str) -> list[Task]:
        if IS_SQLITE:
            fold, needle = func.casefold, keyword.casefold()
        else:
            fold, needle = func.lower, keyword.lower()
        session = get_session()
        try:
            task_models = (
                session.query(TaskModel)
                .filter(
                    fold(TaskModel.title).contains(needle, autoescape=True)
                )
                .order_by(TaskModel.id)
                .all()
            )
            return [_to_domain(task_model) for task_model in task_models]
        finally:
            session.close()
