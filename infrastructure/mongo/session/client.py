import logging
import os
from typing import Any

from pymongo import MongoClient
from pymongo.database import Database

logger = logging.getLogger(__name__)

_client: MongoClient[Any] | None = None


def get_client() -> MongoClient[Any]:
    """
    Cliente de MongoDB compartido por todos los repositorios del proceso.
    """
    global _client
    if _client is None:
        mongo_uri = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        _client = MongoClient(mongo_uri)
        logger.debug("MongoClient creado")
    return _client


def get_db() -> Database[Any]:
    """
    Retorna:
        Database: la base configurada en MONGO_DB_NAME (por defecto
        "task_management").
    """
    db_name = os.getenv("MONGO_DB_NAME", "task_management")
    return get_client()[db_name]


def close_client() -> None:
    """Cierra el cliente si se llegó a crear; se llama al apagar el proceso."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.debug("MongoClient cerrado")
