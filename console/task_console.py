import logging
from datetime import datetime

from console.browser_menu import BrowserMenu
from console.prompts import (
    ConsoleOutcome,
    InputFunc,
    InputParseError,
    read_int,
    read_line,
    rule,
)
from core.application.create_task import CreateTaskCommand
from core.application.task_engine import TaskEngine
from core.application.update_task import UpdateTaskCommand
from core.domain.errors import TaskNotFoundError, TaskValidationError
from core.domain.models.task import Task, TaskStatus

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d %H:%M"
DATE_FORMAT_HINT = "yyyy-MM-dd HH:mm"

STATUS_CHOICES = {
    1: TaskStatus.TODO,
    2: TaskStatus.IN_PROGRESS,
    3: TaskStatus.DONE,
}

_STATUS_ICONS = {
    TaskStatus.TODO: "⭕",
    TaskStatus.IN_PROGRESS: "🔄",
    TaskStatus.DONE: "✅",
}

_AFFIRMATIVE = {"yes", "y"}


def parse_due_date(raw: str) -> datetime:
    """Interpreta una fecha con el formato fijo de la consola."""
    try:
        return datetime.strptime(raw.strip(), DATE_FORMAT)
    except ValueError:
        raise InputParseError(f"Invalid date: {raw!r}") from None


def format_task(task: Task) -> str:
    lines = [
        f"\n{_STATUS_ICONS[task.status]} Task #{task.id} - {task.status.value}",
        f"   Title: {task.title}",
    ]
    if task.description and task.description.strip():
        lines.append(f"   Description: {task.description}")
    if task.due_date is not None:
        lines.append(f"   Due: {task.due_date.strftime(DATE_FORMAT)}")
    if task.created_at is not None:
        lines.append(f"   Created: {task.created_at.strftime(DATE_FORMAT)}")
    lines.append(rule("-", 80))
    return "\n".join(lines)


class TaskConsole:
    """
    Menú interactivo de gestión de tareas.

    El bucle es de un solo hilo y se bloquea en cada prompt. Una entrada mal
    formada nunca lo termina: se informa y se vuelve a mostrar el menú. Solo
    las opciones 0 (salir dejando la API en marcha) y 9 (apagar) lo cierran,
    y en ambos casos el resultado se devuelve a quien lanzó la consola.
    """

    def __init__(
        self,
        engine: TaskEngine,
        browser_menu: BrowserMenu,
        input_func: InputFunc = input,
    ) -> None:
        self._engine = engine
        self._browser_menu = browser_menu
        self._input = input_func
        self._actions = {
            1: self.view_all_tasks,
            2: self.add_task,
            3: self.update_task,
            4: self.delete_task,
            5: self.mark_task_complete,
            6: self.search_tasks,
            7: self.filter_by_status,
        }

    def run(self) -> ConsoleOutcome:
        print("\n" + rule())
        print("🎯 Welcome to Task Manager Console!")
        print(rule())

        while True:
            self._show_menu()
            try:
                outcome = self._dispatch(read_int(self._input, "Your choice: "))
            except InputParseError:
                print("⚠️ Invalid input. Please enter a number.")
                continue
            except (EOFError, KeyboardInterrupt):
                logger.info("Console input closed, leaving the task menu")
                print("\n👋 Exiting Task Manager. API still running!")
                return ConsoleOutcome.EXIT_KEEP_RUNNING
            except Exception as e:
                logger.exception("Console action failed")
                print(f"❌ Unexpected error: {e}")
                continue

            if outcome is not None:
                return outcome

    def _dispatch(self, choice: int) -> ConsoleOutcome | None:
        if choice in self._actions:
            self._actions[choice]()
            return None
        if choice == 8:
            print("🌐 Opening Browser Menu...")
            return self._browser_menu.run()
        if choice == 0:
            print("👋 Exiting Task Manager. API still running!")
            return ConsoleOutcome.EXIT_KEEP_RUNNING
        if choice == 9:
            print("👋 Shutting down application...")
            return ConsoleOutcome.SHUTDOWN

        print("⚠️ Invalid choice. Please try again.")
        return None

    def _show_menu(self) -> None:
        print("\n" + rule())
        print("📋 TASK MANAGEMENT MENU")
        print(rule())
        print("1. 📋 View All Tasks")
        print("2. ➕ Add New Task")
        print("3. ✏️ Update Task")
        print("4. 🗑️ Delete Task")
        print("5. ✅ Mark Task as Complete")
        print("6. 🔍 Search Tasks")
        print("7. 🎯 Filter by Status")
        print("8. 🌐 Browser Menu (open pages)")
        print("0. ⬅️ Exit (API keeps running)")
        print("9. 🛑 Shutdown Application")
        print(rule())

    def _print_tasks(self, header: str, tasks: list[Task]) -> None:
        print("\n" + rule(width=80))
        print(header)
        print(rule(width=80))
        for task in tasks:
            print(format_task(task))

    def _print_status_menu(self) -> None:
        for number, status in STATUS_CHOICES.items():
            print(f"{number}. {status.value}")

    # ──────────────────────────────────────────────────────────────────────
    # Acciones del menú principal
    # ──────────────────────────────────────────────────────────────────────

    def view_all_tasks(self) -> list[Task]:
        tasks = self._engine.list_all()
        if not tasks:
            print("\n📭 No tasks found. Add your first task!")
        else:
            self._print_tasks("📋 ALL TASKS", tasks)
        return tasks

    def add_task(self) -> None:
        print("\n➕ ADD NEW TASK")
        print(rule("-"))

        title = read_line(self._input, "Title: ")
        description = read_line(
            self._input, "Description (optional, press Enter to skip): "
        )

        print("\nSelect Status:")
        self._print_status_menu()
        raw_status = read_line(self._input, "Choice (default 1): ")
        status = STATUS_CHOICES.get(_safe_int(raw_status), TaskStatus.TODO)

        due_date = None
        raw_due = read_line(
            self._input, f"Due Date ({DATE_FORMAT_HINT}, or press Enter to skip): "
        )
        if raw_due:
            try:
                due_date = parse_due_date(raw_due)
            except InputParseError:
                print("⚠️ Invalid date format. Skipping due date.")

        try:
            created = self._engine.create(
                CreateTaskCommand(
                    title=title,
                    description=description or None,
                    status=status,
                    due_date=due_date,
                )
            )
        except TaskValidationError as e:
            print(f"❌ Could not create task: {e}")
            return

        print("\n✅ Task created successfully!")
        print(format_task(created))

    def update_task(self) -> None:
        self.view_all_tasks()

        task_id = read_int(self._input, "\nEnter Task ID to update: ")
        task = self._engine.get_by_id(task_id)
        if task is None:
            print("❌ Task not found!")
            return

        print(f"\n✏️ UPDATING TASK: {task.title}")
        print("(Press Enter to keep current value)")
        print(rule("-"))

        # El motor reemplaza todos los campos: partimos de los valores actuales.
        cmd = UpdateTaskCommand(
            title=task.title,
            description=task.description,
            status=task.status,
            due_date=task.due_date,
        )

        title = read_line(self._input, f"New Title [{task.title}]: ")
        if title:
            cmd.title = title

        description = read_line(
            self._input, f"New Description [{task.description or 'none'}]: "
        )
        if description:
            cmd.description = description

        print(f"\nCurrent Status: {task.status.value}")
        print("1. TODO  2. IN_PROGRESS  3. DONE")
        raw_status = read_line(self._input, "New Status (or Enter to keep): ")
        if raw_status:
            status = STATUS_CHOICES.get(_safe_int(raw_status))
            if status is None:
                print("⚠️ Invalid status choice. Keeping current status.")
            else:
                cmd.status = status

        current_due = (
            task.due_date.strftime(DATE_FORMAT) if task.due_date else "none"
        )
        raw_due = read_line(
            self._input, f"New Due Date ({DATE_FORMAT_HINT}) [{current_due}]: "
        )
        if raw_due:
            try:
                cmd.due_date = parse_due_date(raw_due)
            except InputParseError:
                print("⚠️ Invalid date format. Keeping current due date.")

        try:
            updated = self._engine.update(task_id, cmd)
        except (TaskNotFoundError, TaskValidationError) as e:
            print(f"❌ Error: {e}")
            return

        print("\n✅ Task updated successfully!")
        print(format_task(updated))

    def delete_task(self) -> None:
        self.view_all_tasks()

        task_id = read_int(self._input, "\nEnter Task ID to delete: ")
        if self._engine.get_by_id(task_id) is None:
            print("❌ Task not found!")
            return

        confirm = read_line(
            self._input, "⚠️ Are you sure you want to delete this task? (yes/no): "
        )
        if confirm.lower() not in _AFFIRMATIVE:
            print("❌ Deletion cancelled.")
            return

        try:
            self._engine.delete(task_id)
        except TaskNotFoundError as e:
            print(f"❌ Error: {e}")
            return
        print("✅ Task deleted successfully!")

    def mark_task_complete(self) -> None:
        self.view_all_tasks()

        task_id = read_int(self._input, "\nEnter Task ID to mark as complete: ")
        try:
            completed = self._engine.mark_complete(task_id)
        except TaskNotFoundError as e:
            print(f"❌ Error: {e}")
            return

        print("\n✅ Task marked as DONE!")
        print(format_task(completed))

    def search_tasks(self) -> None:
        keyword = read_line(self._input, "\n🔍 Enter search keyword: ")
        tasks = self._engine.search_by_title(keyword)

        if not tasks:
            print(f"📭 No tasks found matching: {keyword}")
            return
        self._print_tasks(f"🔍 SEARCH RESULTS for: {keyword}", tasks)

    def filter_by_status(self) -> None:
        print("\n🎯 SELECT STATUS:")
        self._print_status_menu()
        choice = read_int(self._input, "Choice: ")

        status = STATUS_CHOICES.get(choice)
        if status is None:
            print("⚠️ Invalid status choice.")
            return

        tasks = self._engine.list_by_status(status)
        if not tasks:
            print(f"📭 No {status.value} tasks found.")
            return
        self._print_tasks(f"🎯 TASKS WITH STATUS: {status.value}", tasks)


def _safe_int(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None
