import logging
from contextlib import contextmanager
from datetime import datetime, timezone

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from shared.core.errors import StoreError

logger = logging.getLogger(__name__)

Base = declarative_base()

POOL_SIZE = 5
MAX_OVERFLOW = 5


def utcnow() -> datetime:
    # naive UTC, SQLite DateTime columns drop tzinfo anyway
    return datetime.now(timezone.utc).replace(tzinfo=None)


def build_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url, connect_args={"check_same_thread": False}
        )

    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_recycle=300,
        pool_size=POOL_SIZE,          # max idle connections
        max_overflow=MAX_OVERFLOW,    # max temporary extra connections
        pool_timeout=30               # wait time before failing
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependencies


def get_session_factory(request: Request) -> sessionmaker:
    return request.app.state.session_factory


def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session):
    """Commit everything done inside the block, or roll all of it back.

    IntegrityError is re-raised untouched so callers can map constraint
    violations to their own domain errors; any other SQLAlchemy failure
    becomes a StoreError.
    """
    try:
        yield db
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("❌ Transaction failed, rolled back")
        raise StoreError() from exc
    except Exception:
        db.rollback()
        raise
