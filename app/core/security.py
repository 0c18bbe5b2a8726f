"""
Bearer token authentication and role checks.

Tokens are HS256 JWTs carrying a subject (``sub``) and a ``role``
claim. ``get_current_user`` resolves the token on the request and
``require_roles`` builds a dependency that gates a route on the role.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional
import logging

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.config.settings import get_settings
from app.utils.exceptions import AuthenticationError, AuthorizationError

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def create_access_token(claims: Dict[str, Any], expires_minutes: Optional[int] = None) -> str:
    """
    Create a signed token with the given claims.

    Args:
        claims: Claims to embed, e.g. ``{"sub": "alice", "role": "ROLE_ADMIN"}``.
        expires_minutes: Lifetime of the token. Defaults to
            ``settings.access_token_expire_minutes``.

    Returns:
        The encoded token.
    """
    settings = get_settings()
    lifetime = expires_minutes if expires_minutes is not None else settings.access_token_expire_minutes
    payload = dict(claims)
    payload["exp"] = datetime.now(timezone.utc) + timedelta(minutes=lifetime)
    return jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """Verify a token's signature and expiry and return its claims."""
    settings = get_settings()
    return jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Dict[str, Any]:
    """
    Dependency returning the claims of the request's bearer token.

    Raises AuthenticationError when the header is missing or the token
    cannot be verified.
    """
    if credentials is None:
        raise AuthenticationError("Access denied. No token provided.")

    try:
        return decode_access_token(credentials.credentials)
    except jwt.PyJWTError as e:
        logger.info(f"Rejected bearer token: {e}")
        raise AuthenticationError("Invalid token.") from e


def require_roles(*roles: str) -> Callable[..., Dict[str, Any]]:
    """
    Dependency factory allowing only tokens whose ``role`` is one of ``roles``.

    Use as ``Depends(require_roles("ROLE_ADMIN"))``.
    """

    def _role_dependency(current_user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
        if current_user.get("role") not in roles:
            raise AuthorizationError("Access denied")
        return current_user

    return _role_dependency
