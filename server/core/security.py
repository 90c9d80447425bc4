# server/core/security.py

from datetime import datetime, timedelta, timezone
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from core.errors import ExpiredTokenError, InvalidTokenError


# -------------------------------
# Password Hashing
# -------------------------------

class PasswordHasher:
    """
    One-way bcrypt hashing with a random salt embedded in every hash.
    """

    def __init__(self, rounds: int = 10):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, plain_password: str) -> str:
        return self._context.hash(plain_password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        # passlib raises on hashes it cannot identify
        try:
            return self._context.verify(plain_password, hashed_password)
        except (ValueError, TypeError):
            return False


# -------------------------------
# Identity Tokens
# -------------------------------

class TokenService:
    """
    Issues and verifies signed, time-limited identity tokens.

    Tokens are stateless JWTs carrying ``userId``, ``email``, ``iat`` and
    ``exp``. Nothing is stored server side, so a token stays valid until it
    expires.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_delta: timedelta = timedelta(days=1),
    ):
        if not secret_key:
            raise ValueError("A signing secret is required to issue tokens")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self.expires_delta = expires_delta

    def issue(self, user_id: int, email: str, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "userId": user_id,
            "email": email,
            "iat": issued_at,
            "exp": issued_at + self.expires_delta,
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str | None) -> int:
        if not token:
            raise InvalidTokenError("Missing token")
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except ExpiredSignatureError:
            raise ExpiredTokenError()
        except JWTError:
            raise InvalidTokenError()

        user_id = payload.get("userId")
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise InvalidTokenError("Token carries no user id")
        return user_id
