import os
from peewee import SqliteDatabase
from playhouse.db_url import connect

# Default to a SQLite file next to the process
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tasks.db")

# Peewee opens one connection per thread (console thread + HTTP workers).
db = connect(DATABASE_URL)

IS_SQLITE = isinstance(db, SqliteDatabase)

if IS_SQLITE:
    # LIKE y LOWER de SQLite solo pliegan mayúsculas ASCII.
    @db.func("casefold")
    def _casefold(value):
        return value.casefold() if value is not None else None


def init_db(models) -> None:
    db.connect(reuse_if_open=True)
    db.create_tables(models, safe=True)
