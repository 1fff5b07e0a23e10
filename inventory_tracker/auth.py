"""
Authentication gate for the Inventory Tracker.

Validates JWT bearer tokens issued by the authentication service. Token
issuance lives elsewhere; ``create_access_token`` signs tokens with the same
settings for local tooling and tests.
"""
import logging
from datetime import datetime, timedelta
from typing import Optional
from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel

from .config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES

logger = logging.getLogger(__name__)

# Security scheme for JWT bearer tokens; a missing header is reported as 401 below
security = HTTPBearer(auto_error=False)

NO_TOKEN_MESSAGE = "No token, authorization denied"
INVALID_TOKEN_MESSAGE = "Token is not valid"


class CurrentUser(BaseModel):
    """Current authenticated user information."""
    id: str
    email: Optional[str] = None
    token: str


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=message,
        headers={"WWW-Authenticate": "Bearer"},
    )


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a JWT access token.

    Args:
        data: Dictionary containing the claims to encode in the token
        expires_delta: Optional custom expiration time delta

    Returns:
        Encoded JWT token string
    """
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> CurrentUser:
    """
    FastAPI dependency to get the current authenticated user from JWT token.

    Args:
        credentials: HTTP Authorization credentials (injected)

    Returns:
        Current authenticated user information

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    if credentials is None:
        logger.warning("Rejected request without bearer token")
        raise _unauthorized(NO_TOKEN_MESSAGE)

    token = credentials.credentials
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        logger.error(f"JWT validation error: {e}")
        raise _unauthorized(INVALID_TOKEN_MESSAGE)

    # Tokens carry the user id either as "sub" or as "id"
    user_id = payload.get("sub") or payload.get("id")
    if user_id is None:
        logger.error("No 'sub' or 'id' claim in token")
        raise _unauthorized(INVALID_TOKEN_MESSAGE)

    return CurrentUser(id=str(user_id), email=payload.get("email"), token=token)
