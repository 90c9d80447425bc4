# server/core/users.py

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.errors import ConflictError
from models.user import User


def find_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def find_by_id(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def create_user(db: Session, email: str, name: str, hashed_password: str) -> User:
    """
    Inserts a new user and lets the unique email constraint decide
    whether the address is already taken.
    """
    user = User(email=email, name=name, hashed_password=hashed_password)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("User already Exists")
    db.refresh(user)
    return user
