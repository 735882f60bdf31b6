from core.domain.errors import TaskValidationError
from core.domain.models.task import DESCRIPTION_MAX_LENGTH, TaskStatus


def validate_task_fields(
    title: str | None, description: str | None, status: TaskStatus
) -> None:
    """
    Comprueba las invariantes de una tarea antes de tocar el repositorio.

    Raises:
        TaskValidationError: título vacío, descripción demasiado larga o
            estado fuera del enum.
    """
    if title is None or not title.strip():
        raise TaskValidationError("Title is required and cannot be blank")
    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        raise TaskValidationError(
            f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters"
        )
    if not isinstance(status, TaskStatus):
        raise TaskValidationError(f"Invalid status: {status!r}")
