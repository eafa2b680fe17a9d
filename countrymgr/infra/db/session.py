# countrymgr/infra/db/session.py
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import ArgumentError, DBAPIError
from sqlalchemy.orm import Session, sessionmaker

from countrymgr.core.config import Settings
from countrymgr.core.errors import StoreUnavailableError
from countrymgr.infra.db.base import Base

# Registra la tabla en Base.metadata antes de create_all
from countrymgr.infra.db.models import country  # noqa: F401

logger = logging.getLogger(__name__)


class StoreClient:
    """
    Dueño explícito del engine y de la fábrica de sesiones.
    Se construye una vez en main() y se pasa al repositorio.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = sessionmaker(
            bind=engine,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, config: Settings) -> "StoreClient":
        logger.info("Conectando a %s (%s)", config.DATABASE_URL, config.ENVIRONMENT)
        try:
            engine = create_engine(config.DATABASE_URL, echo=config.SQL_ECHO, future=True)
        except (ArgumentError, ImportError) as e:
            # URL mal formada, dialecto desconocido o driver sin instalar
            raise StoreUnavailableError(f"Invalid DATABASE_URL: {e}") from e
        return cls(engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Una unidad de trabajo: sesión + transacción, commit o rollback, y cierre."""
        with self._session_factory() as session:
            with session.begin():
                yield session

    def init_db(self) -> None:
        """Crea las tablas si no existen (sin migraciones)."""
        try:
            with self.engine.begin() as conn:
                conn.execute(text("SELECT 1"))
                Base.metadata.create_all(conn)
        except DBAPIError as e:
            raise StoreUnavailableError(f"Database error: {e}") from e

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Conexiones a la base de datos cerradas")
