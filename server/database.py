# server/database.py

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from core.errors import StartupError
from models import Base
import models.user  # noqa: F401  registers the users table on Base


def create_db_engine(database_url: str, max_connections: int) -> Engine:
    kwargs = dict(pool_size=max_connections, max_overflow=0)
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
    try:
        return create_engine(database_url, **kwargs)
    except (SQLAlchemyError, TypeError) as e:
        raise StartupError(f"Invalid DATABASE_URL: {e}") from e


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autoflush=False,
        bind=engine
    )


def check_connection(engine: Engine):
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        raise StartupError(f"Failed to connect to database: {e}") from e


def init_db(engine: Engine):
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        raise StartupError(f"Failed to prepare users table: {e}") from e


def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
