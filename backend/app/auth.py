from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Request
from jose import JWTError, jwt
from app.config import get_settings
from app.errors import UnauthenticatedError

settings = get_settings()

ALGORITHM = "HS256"
COOKIE_NAME = "session_token"


def create_access_token(user_id: str) -> str:
    expire = datetime.now(timezone.utc) + timedelta(days=settings.token_expire_days)
    to_encode = {"sub": user_id, "exp": expire}
    return jwt.encode(to_encode, settings.secret_key, algorithm=ALGORITHM)


def verify_access_token(token: str) -> Optional[str]:
    """Return the user id carried by a valid token, else None."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
    except JWTError:
        return None
    return payload.get("sub") or None


def _extract_token(request: Request) -> Optional[str]:
    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials
    return request.cookies.get(COOKIE_NAME)


async def get_current_user_id(request: Request) -> str:
    token = _extract_token(request)
    user_id = verify_access_token(token) if token else None
    if not user_id:
        raise UnauthenticatedError()
    return user_id
