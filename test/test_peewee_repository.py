import unittest
from datetime import datetime

from core.domain.models.task import Task, TaskStatus
from infrastructure.peewee.session.db import db
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository

NOW = datetime(2024, 5, 1, 9, 30, 15, 123456)


def _task(title: str, status: TaskStatus = TaskStatus.TODO) -> Task:
    return Task(title=title, status=status, created_at=NOW, updated_at=NOW)


class PeeweeTaskRepositoryTests(unittest.TestCase):
    def setUp(self) -> None:
        # Ensure clean state
        if db.is_closed():
            db.connect()
        db.create_tables([TaskModel], safe=True)
        TaskModel.delete().execute()
        self.repo = PeeweeTaskRepository()

    def tearDown(self) -> None:
        db.drop_tables([TaskModel])
        db.close()

    def test_save_assigns_id_and_get_round_trips(self) -> None:
        task = Task(
            title="Peewee task",
            description="desc",
            status=TaskStatus.IN_PROGRESS,
            due_date=datetime(2024, 6, 1, 18, 0),
            created_at=NOW,
            updated_at=NOW,
        )

        saved = self.repo.save(task)
        loaded = self.repo.find_by_id(saved.id)

        self.assertIsNone(task.id)
        self.assertIsNotNone(saved.id)
        self.assertEqual(loaded, saved)

    def test_save_existing_task_keeps_created_at(self) -> None:
        saved = self.repo.save(_task("first"))
        later = datetime(2024, 5, 2, 10, 0)

        saved.title = "second"
        saved.created_at = later
        saved.updated_at = later
        self.repo.save(saved)

        loaded = self.repo.find_by_id(saved.id)
        self.assertEqual(loaded.title, "second")
        self.assertEqual(loaded.created_at, NOW)
        self.assertEqual(loaded.updated_at, later)
        self.assertEqual(len(self.repo.find_all()), 1)

    def test_delete_and_exists(self) -> None:
        saved = self.repo.save(_task("delete me"))
        self.assertTrue(self.repo.exists_by_id(saved.id))

        self.repo.delete_by_id(saved.id)

        self.assertFalse(self.repo.exists_by_id(saved.id))
        self.assertIsNone(self.repo.find_by_id(saved.id))

    def test_find_by_status(self) -> None:
        self.repo.save(_task("a"))
        self.repo.save(_task("b", TaskStatus.DONE))

        done = self.repo.find_by_status(TaskStatus.DONE)

        self.assertEqual([t.title for t in done], ["b"])

    def test_find_by_title_containing_ignores_case(self) -> None:
        self.repo.save(_task("Spring Boot Basics"))
        self.repo.save(_task("Groceries"))

        for keyword in ("SPRING", "spring"):
            found = self.repo.find_by_title_containing(keyword)
            self.assertEqual([t.title for t in found], ["Spring Boot Basics"])

    def test_find_by_title_containing_folds_non_ascii_case(self) -> None:
        self.repo.save(_task("Über Task"))
        self.repo.save(_task("Straße 5"))

        found = self.repo.find_by_title_containing("über")
        self.assertEqual([t.title for t in found], ["Über Task"])

        found = self.repo.find_by_title_containing("STRASSE")
        self.assertEqual([t.title for t in found], ["Straße 5"])

    def test_find_by_title_containing_treats_wildcards_literally(self) -> None:
        self.repo.save(_task("50% off_sale"))
        self.repo.save(_task("500 offers"))

        found = self.repo.find_by_title_containing("0% off_")
        self.assertEqual([t.title for t in found], ["50% off_sale"])


if __name__ == "__main__":
    unittest.main()
