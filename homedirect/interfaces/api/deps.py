"""FastAPI dependency — JWT auth."""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from homedirect.application.services.auth_service import decode_access_token
from homedirect.core.exceptions import ForbiddenException, UnauthorizedException
from homedirect.domain.models.user import User
from homedirect.domain.repositories.user_repository import UserRepository
from homedirect.interfaces.deps import get_user_repository

security = HTTPBearer(auto_error=False)


def _user_from_token(token: str, users: UserRepository) -> User:
    payload = decode_access_token(token)
    if payload is None:
        raise UnauthorizedException("Invalid or expired token")

    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        raise UnauthorizedException("Invalid token")

    user = users.get_by_id(int(subject))
    if user is None:
        raise UnauthorizedException("User not found")
    return user


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    users: UserRepository = Depends(get_user_repository),
) -> Optional[User]:
    """Current user when a bearer token is sent, None for anonymous requests."""
    if credentials is None:
        return None
    return _user_from_token(credentials.credentials, users)


def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """Extract and validate the current user from JWT token."""
    if user is None:
        raise UnauthorizedException("Authentication required")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    """Require admin role."""
    if not user.is_admin:
        raise ForbiddenException("Admin access required")
    return user
