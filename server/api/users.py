# server/api/users.py

import logging
from pydantic import BaseModel
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session
from core.errors import ValidationError
from core.users import create_user, list_users, render_users
from database import get_db


log = logging.getLogger("registry.users")

router = APIRouter()


class CreateUser(BaseModel):
    username: str | None = None
    password: str | None = None
    email: str | None = None


class UserCreated(BaseModel):
    message: str
    user_id: int


# -------------------------------
# User Endpoints
# -------------------------------

@router.post("/saving", status_code=status.HTTP_201_CREATED, response_model=UserCreated)
def save_user(payload: CreateUser, db: Session = Depends(get_db)):
    """
    Registers a new user from a username/password pair.
    Responds 400 when either field is missing or empty.
    """
    try:
        user_id = create_user(db, payload.username, payload.password, payload.email)
    except ValidationError as e:
        log.info("Rejected registration: %s", e)
        raise
    return UserCreated(message="User created", user_id=user_id)


@router.get("/users", response_class=PlainTextResponse)
def get_users(db: Session = Depends(get_db)):
    return render_users(list_users(db))
