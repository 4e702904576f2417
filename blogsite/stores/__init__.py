# blogsite/stores/__init__.py
"""
Acceso a la base: usuarios (users.py) y blogs (blogs.py).
Las rutas nunca tocan db.session directamente.
"""
import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from blogsite.errors import StorageError
from blogsite.extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def committing(action):
    """Hace commit al salir; cualquier error de SQLAlchemy se vuelve StorageError."""
    try:
        yield db.session
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("❌ Error de base de datos al %s: %s", action, e)
        raise StorageError(f"Failed to {action}") from e
