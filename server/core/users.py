# server/core/users.py

import json
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from core.errors import StoreError, ValidationError
from models.user import User


log = logging.getLogger("registry.users")

# Driver-side encode/decode failures reach us unwrapped by SQLAlchemy
STORE_FAULTS = (SQLAlchemyError, UnicodeError)


def validate_new_user(username: str | None, password: str | None) -> tuple[str, str]:
    """
    Checks presence of the required fields, username first.
    Only absence and the empty string are rejected.
    """
    if not username:
        raise ValidationError("Username is required")
    if not password:
        raise ValidationError("Password is required")
    return username, password


def create_user(db: Session, username: str | None, password: str | None, email: str | None = None) -> int:
    username, password = validate_new_user(username, password)

    user = User(username=username, password=password, email=email)
    try:
        db.add(user)
        db.flush()
        user_id = user.id
        db.commit()
    except STORE_FAULTS as e:
        db.rollback()
        raise StoreError(f"Could not insert user: {e}") from e

    log.info("Created user id=%s", user_id)
    return user_id


def list_users(db: Session) -> list[tuple[int, str]]:
    try:
        rows = db.query(User.id, User.username).all()
    except STORE_FAULTS as e:
        db.rollback()
        raise StoreError(f"Could not list users: {e}") from e
    return [(row.id, row.username) for row in rows]


def render_users(rows: list[tuple[int, str]]) -> str:
    # e.g. [(1, "alice"), (2, "bob")]
    # Escaping follows JSON, so control characters render as \u001b
    return "[" + ", ".join(f"({user_id}, {json.dumps(username, ensure_ascii=False)})" for user_id, username in rows) + "]"
