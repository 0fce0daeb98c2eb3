# app/core/auth.py
from datetime import datetime, timedelta, timezone
from typing import Any

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError

from app.core.config import get_settings

settings = get_settings()

# HTTP Bearer scheme:
# - auto_error=False => missing Authorization header will NOT raise immediately
#   so we can answer with our own 401 message.
bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(
    claims: dict[str, Any],
    expires_delta: timedelta = timedelta(days=1),
) -> str:
    """
    Sign a JWT with the configured secret.

    Typical claims: {"userId": "<id>", "isAdmin": true}
    """
    payload = dict(claims)
    payload["exp"] = datetime.now(timezone.utc) + expires_delta
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALG)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and verify an access token (JWT).

    Verification:
      - signature (HS256 using JWT_SECRET)
      - expiration time (exp)

    Raises:
        HTTPException(401): if token is invalid/expired.
    """
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALG],
        )
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )


def require_auth(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> dict[str, Any]:
    """
    Enforce authentication and return the token claims.

    Raises:
        HTTPException(401): if the Authorization header is missing or invalid.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return decode_access_token(credentials.credentials)


def require_admin(claims: dict[str, Any] = Depends(require_auth)) -> dict[str, Any]:
    """
    Enforce admin role.

    Route is accessible only if the token carries `"isAdmin": true`.

    Raises:
        HTTPException(403): if the claim is missing or false.
    """
    if not claims.get("isAdmin"):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return claims
