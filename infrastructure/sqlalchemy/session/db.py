import os

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, declarative_base, sessionmaker

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tasks.db")

IS_SQLITE = DATABASE_URL.startswith("sqlite")

_connect_args = {"check_same_thread": False} if IS_SQLITE else {}

engine = create_engine(DATABASE_URL, connect_args=_connect_args)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
Base = declarative_base()


def _casefold(value):
    return value.casefold() if value is not None else None


def _register_sqlite_functions(dbapi_connection, connection_record) -> None:
    # lower() de SQLite solo pliega mayúsculas ASCII.
    dbapi_connection.create_function("casefold", 1, _casefold)


if IS_SQLITE:
    event.listen(engine, "connect", _register_sqlite_functions)


def get_session() -> Session:
    return SessionLocal()


def init_db() -> None:
    # Import the models so they are registered on Base before create_all.
    from infrastructure.sqlalchemy.model import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
