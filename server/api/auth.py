# server/api/auth.py

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session

import config
from api.deps import get_current_user_id, get_token_service
from core.errors import UnauthorizedError, ValidationError
from core.logger import get_logger
from core.security import PasswordHasher, TokenService
from core.users import create_user, find_by_email, find_by_id
from database import get_db


router = APIRouter()
logger = get_logger(__name__)
password_hasher = PasswordHasher(rounds=config.BCRYPT_ROUNDS)


class SignupRequest(BaseModel):
    email: str | None = None
    password: str | None = None
    name: str | None = None


class SigninRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class UserOut(BaseModel):
    """
    Public view of a user. The password hash has no field here, so it can
    never be serialized into a response.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str


class SignupResponse(BaseModel):
    message: str
    user: UserOut


class SigninResponse(BaseModel):
    message: str
    token: str


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
def signup(req: SignupRequest, db: Session = Depends(get_db)):
    if not req.email or not req.password or not req.name:
        raise ValidationError("Missing required fields")

    hashed = password_hasher.hash(req.password)
    user = create_user(db, req.email, req.name, hashed)
    logger.info("Registered user id=%s", user.id)
    return {"message": "User created Successfully", "user": UserOut.model_validate(user)}


@router.post("/signin", response_model=SigninResponse)
def signin(
    req: SigninRequest,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    if not req.email or not req.password:
        raise ValidationError("Email and Password are required")

    user = find_by_email(db, req.email)
    if not user:
        logger.info("Signin failed: unknown email")
        raise UnauthorizedError("Invalid Credentials")

    if not password_hasher.verify(req.password, user.hashed_password):
        logger.info("Signin failed: wrong password for user id=%s", user.id)
        raise UnauthorizedError("Wrong Credentials")

    token = tokens.issue(user.id, user.email)
    logger.info("Signin succeeded for user id=%s", user.id)
    return {"message": "Signin Successful", "token": token}


@router.get("/users/me", response_model=UserOut)
def read_users_me(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    user = find_by_id(db, user_id)
    if not user:
        raise UnauthorizedError()
    return UserOut.model_validate(user)
