# server/api/deps.py

from fastapi import Depends, Header, Request

from core.errors import AuthError, UnauthorizedError
from core.logger import get_logger
from core.security import TokenService


logger = get_logger(__name__)

BEARER_PREFIX = "Bearer "


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_current_user_id(
    authorization: str | None = Header(default=None),
    tokens: TokenService = Depends(get_token_service),
) -> int:
    """
    Resolves the user id from a ``Authorization: Bearer <token>`` header.
    Any missing, malformed, forged or expired token is a plain 401.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise UnauthorizedError()

    token = authorization[len(BEARER_PREFIX):].strip()
    try:
        return tokens.verify(token)
    except AuthError as e:
        logger.warning("Rejected token: %s", e.message)
        raise UnauthorizedError()
