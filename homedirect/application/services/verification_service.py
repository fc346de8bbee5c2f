"""Verification service — one-time email codes gating listing creation.

A user holds at most one outstanding code. Issuing a new code overwrites
the previous one; a successful verification clears it.
"""

import secrets
from datetime import timedelta
from typing import Optional

import structlog
from fastapi import BackgroundTasks

from homedirect.config import get_settings
from homedirect.core.clock import now
from homedirect.core.exceptions import (
    AlreadyVerifiedException,
    EntityNotFoundException,
    InvalidVerificationCodeException,
    VerificationCodeExpiredException,
)
from homedirect.domain.models.user import User
from homedirect.domain.repositories.user_repository import UserRepository
from homedirect.infrastructure.mailer import (
    VERIFICATION_SUBJECT,
    Notifier,
    format_verification_message,
)

logger = structlog.get_logger(__name__)

CODE_MIN = 100000
CODE_MAX = 999999


def generate_verification_code() -> str:
    """Uniformly random 6-digit code in [100000, 999999]."""
    return str(CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN + 1))


def _get_user_by_email(users: UserRepository, email: str) -> User:
    user = users.get_by_email(email)
    if user is None:
        raise EntityNotFoundException("User not found", details={"email": email})
    return user


def issue_verification_code(
    users: UserRepository,
    notifier: Notifier,
    user_id: int,
    background_tasks: Optional[BackgroundTasks] = None,
) -> None:
    """Store a fresh code on the user and hand it to the notifier.

    With background_tasks the message goes out after the response is sent,
    so a slow mail gateway never holds up the request.
    """
    user = users.get_by_id(user_id)
    if user is None:
        raise EntityNotFoundException("User not found", details={"user_id": user_id})

    code = generate_verification_code()
    user = users.update(user.id, {"verification_code": code, "verification_code_issued_at": now()})
    logger.info("Verification code issued", user_id=user.id)

    ttl = get_settings().VERIFICATION_CODE_TTL_MINUTES
    body = format_verification_message(user.first_name, code, ttl)
    if background_tasks is not None:
        background_tasks.add_task(notifier.send, user.email, VERIFICATION_SUBJECT, body)
    else:
        notifier.send(user.email, VERIFICATION_SUBJECT, body)


def request_verification_code(
    users: UserRepository,
    notifier: Notifier,
    email: str,
    background_tasks: Optional[BackgroundTasks] = None,
) -> None:
    """Re-send flow: only unverified users may ask for a new code."""
    user = _get_user_by_email(users, email)
    if user.is_verified:
        raise AlreadyVerifiedException(details={"email": email})
    issue_verification_code(users, notifier, user.id, background_tasks)


def is_code_expired(user: User, ttl_minutes: Optional[int] = None) -> bool:
    if ttl_minutes is None:
        ttl_minutes = get_settings().VERIFICATION_CODE_TTL_MINUTES
    if ttl_minutes <= 0 or user.verification_code_issued_at is None:
        return False
    return now() - user.verification_code_issued_at > timedelta(minutes=ttl_minutes)


def verify_code(users: UserRepository, email: str, code: str) -> User:
    """Mark the user verified if the code matches exactly. Codes are single-use."""
    with users.locked():
        user = _get_user_by_email(users, email)

        if user.is_verified:
            raise AlreadyVerifiedException(details={"email": email})
        if user.verification_code is None or user.verification_code != code:
            logger.info("Verification code rejected", user_id=user.id)
            raise InvalidVerificationCodeException()
        if is_code_expired(user):
            raise VerificationCodeExpiredException()

        user = users.update(
            user.id,
            {"is_verified": True, "verification_code": None, "verification_code_issued_at": None},
        )

    logger.info("Email verified", user_id=user.id)
    return user
