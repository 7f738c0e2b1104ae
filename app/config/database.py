# app/config/database.py
from contextlib import contextmanager
from typing import Iterator
import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.exceptions import StoreError
from .settings import settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Crear engine con la configuración adecuada para el motor"""
    engine_kwargs = {
        "pool_pre_ping": True,
        "echo": echo
    }
    
    if database_url.startswith("sqlite"):
        # Las sesiones se usan desde el threadpool de FastAPI
        engine_kwargs["connect_args"] = {"check_same_thread": False}
    else:
        engine_kwargs["pool_recycle"] = 300
        # Agregar SSL para producción en Render
        if "render" in database_url:
            engine_kwargs["connect_args"] = {"sslmode": "require"}
    
    new_engine = create_engine(database_url, **engine_kwargs)
    
    if database_url.startswith("sqlite"):
        event.listen(new_engine, "connect", _enable_sqlite_foreign_keys)
    
    return new_engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite no aplica llaves foráneas sin este pragma
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# Create engine
engine = build_engine(settings.database_url_with_ssl, echo=settings.debug)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def create_tables(bind: Engine = engine) -> None:
    """Crear tablas si no existen (sin migraciones)"""
    from app.shared.database.models import Base
    
    Base.metadata.create_all(bind=bind)
    logger.info("Tablas verificadas")


# Database dependency
def get_db():
    """Database dependency for FastAPI"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """
    Alcance transaccional sobre una sesión existente.
    
    Commit al salir normalmente; rollback ante cualquier excepción
    (incluida una cancelación) y la excepción se propaga.
    """
    try:
        yield db
        db.commit()
    except BaseException:
        db.rollback()
        raise


@contextmanager
def store_errors(db: Session, action: str) -> Iterator[None]:
    """
    Convertir errores de SQLAlchemy en StoreError.
    
    La sesión se revierte antes de propagar, así ninguna transacción
    queda abierta ni aplicada a medias.
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.exception(f"Error de base de datos {action}")
        db.rollback()
        raise StoreError(f"Error {action}: {str(e)}") from e
