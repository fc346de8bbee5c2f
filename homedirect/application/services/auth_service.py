"""Auth service — registration, password hashing and JWT tokens."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog
from fastapi import BackgroundTasks
from jose import JWTError, jwt
from passlib.context import CryptContext

from homedirect.application.services.verification_service import issue_verification_code
from homedirect.config import Settings, get_settings
from homedirect.core.exceptions import ConflictException
from homedirect.domain.models.user import User
from homedirect.domain.repositories.user_repository import UserRepository
from homedirect.domain.schemas.auth import UserCreate
from homedirect.infrastructure.mailer import Notifier

logger = structlog.get_logger(__name__)
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    settings = get_settings()
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.JWT_EXPIRATION_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    settings = get_settings()
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
        return payload
    except JWTError:
        return None


def authenticate_user(users: UserRepository, username: str, password: str) -> Optional[User]:
    user = users.get_by_username(username)
    if not user or not verify_password(password, user.password_hash):
        return None
    return user


def register_user(
    users: UserRepository,
    notifier: Notifier,
    body: UserCreate,
    background_tasks: Optional[BackgroundTasks] = None,
) -> User:
    """Create an unverified account and send it a verification code."""
    with users.locked():
        if users.get_by_username(body.username):
            raise ConflictException("Username already exists", details={"field": "username"})
        if users.get_by_email(body.email):
            raise ConflictException("Email already exists", details={"field": "email"})

        user = users.create(
            {
                "username": body.username,
                "email": body.email,
                "password_hash": hash_password(body.password),
                "first_name": body.first_name,
                "last_name": body.last_name,
                "middle_name": body.middle_name or None,
                "phone_number": body.phone_number or None,
                "is_admin": False,
                "is_verified": False,
            }
        )

    logger.info("User registered", user_id=user.id, username=user.username)
    issue_verification_code(users, notifier, user.id, background_tasks)
    return users.get_by_id(user.id)


def seed_admin(users: UserRepository, settings: Optional[Settings] = None) -> User:
    """Create the configured administrator unless it already exists."""
    settings = settings or get_settings()
    existing = users.get_by_username(settings.ADMIN_USERNAME)
    if existing:
        return existing

    admin = users.create(
        {
            "username": settings.ADMIN_USERNAME,
            "email": settings.ADMIN_EMAIL,
            "password_hash": hash_password(settings.ADMIN_PASSWORD),
            "first_name": "Admin",
            "last_name": "User",
            "is_admin": True,
            "is_verified": True,
        }
    )
    logger.info("Default admin user created", username=admin.username, email=admin.email)
    return admin
