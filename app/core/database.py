import logging
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.core.config import settings
from app.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)

if settings.DATABASE_URL.startswith("sqlite"):
    engine = create_engine(settings.DATABASE_URL, connect_args={"check_same_thread": False})
else:
    engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@contextmanager
def persistence_errors(db: Session, operation: str):
    """Roll back and re-raise any SQLAlchemy failure as a PersistenceError."""
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Database error during {operation}: {exc}", exc_info=True)
        raise PersistenceError(context={"operation": operation}) from exc
