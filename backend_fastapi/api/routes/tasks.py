from fastapi import APIRouter, Depends, HTTPException, Query, status

from backend_fastapi.api.deps import task_engine
from core.application.create_task import CreateTaskCommand
from core.application.task_engine import TaskEngine
from core.application.update_task import UpdateTaskCommand
from core.domain.errors import TaskNotFoundError, TaskValidationError
from core.domain.models.task import Task, TaskStatus

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get(
    "",
    response_model=list[Task],
    summary="List all tasks",
)
def list_tasks(
    engine: TaskEngine = Depends(task_engine),
) -> list[Task]:
    return engine.list_all()


@router.get(
    "/search",
    response_model=list[Task],
    summary="Search tasks by title",
)
def search_tasks(
    keyword: str = Query(..., description="Case-insensitive title fragment"),
    engine: TaskEngine = Depends(task_engine),
) -> list[Task]:
    return engine.search_by_title(keyword)


@router.get(
    "/status/{task_status}",
    response_model=list[Task],
    summary="List tasks with a given status",
)
def list_tasks_by_status(
    task_status: TaskStatus,
    engine: TaskEngine = Depends(task_engine),
) -> list[Task]:
    return engine.list_by_status(task_status)


@router.get(
    "/{task_id}",
    response_model=Task,
    summary="Get a task by id",
)
def get_task(
    task_id: int,
    engine: TaskEngine = Depends(task_engine),
) -> Task:
    task = engine.get_by_id(task_id)
    if task is None:
        raise HTTPException(status_code=404, detail=f"Task not found with id: {task_id}")
    return task


@router.post(
    "",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
)
def create_task(
    cmd: CreateTaskCommand,
    engine: TaskEngine = Depends(task_engine),
) -> Task:
    """
    Creates a new task.

    - **title**: Task title (required, not blank).
    - **description**: Optional description, up to 1000 characters.
    - **status**: Initial status (TODO by default).
    - **due_date**: Optional due date.
    """
    try:
        return engine.create(cmd)
    except TaskValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put(
    "/{task_id}",
    response_model=Task,
    summary="Replace an existing task",
)
def update_task(
    task_id: int,
    cmd: UpdateTaskCommand,
    engine: TaskEngine = Depends(task_engine),
) -> Task:
    """
    Replaces the editable fields of a task. Omitted fields are reset to
    their defaults.

    - **task_id**: Id of the task to modify.
    """
    try:
        return engine.update(task_id, cmd)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except TaskValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task",
)
def delete_task(
    task_id: int,
    engine: TaskEngine = Depends(task_engine),
) -> None:
    try:
        engine.delete(task_id)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch(
    "/{task_id}/complete",
    response_model=Task,
    summary="Mark a task as complete",
)
def complete_task(
    task_id: int,
    engine: TaskEngine = Depends(task_engine),
) -> Task:
    try:
        return engine.mark_complete(task_id)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
