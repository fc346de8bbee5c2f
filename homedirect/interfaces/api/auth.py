"""Auth API routes — register, login, current user, email verification."""

from fastapi import APIRouter, BackgroundTasks, Depends, status

from homedirect.application.services.auth_service import (
    authenticate_user,
    create_access_token,
    register_user,
)
from homedirect.application.services.verification_service import (
    request_verification_code,
    verify_code,
)
from homedirect.core.exceptions import UnauthorizedException
from homedirect.domain.models.user import User
from homedirect.domain.repositories.user_repository import UserRepository
from homedirect.domain.schemas.auth import (
    LoginRequest,
    RequestVerificationRequest,
    TokenResponse,
    UserCreate,
    UserRead,
    VerifyEmailRequest,
)
from homedirect.infrastructure.mailer import Notifier
from homedirect.interfaces.api.deps import get_current_user
from homedirect.interfaces.deps import get_notifier, get_user_repository

router = APIRouter(prefix="/api", tags=["Auth"])


def _token_for(user: User) -> TokenResponse:
    access_token = create_access_token(data={"sub": str(user.id)})
    return TokenResponse(access_token=access_token, user=UserRead.model_validate(user))


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: UserCreate,
    background_tasks: BackgroundTasks,
    users: UserRepository = Depends(get_user_repository),
    notifier: Notifier = Depends(get_notifier),
):
    user = register_user(users, notifier, body, background_tasks)
    return _token_for(user)


@router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest, users: UserRepository = Depends(get_user_repository)):
    user = authenticate_user(users, body.username, body.password)
    if not user:
        raise UnauthorizedException("Incorrect username or password")
    return _token_for(user)


@router.get("/user", response_model=UserRead)
def get_me(user: User = Depends(get_current_user)):
    return UserRead.model_validate(user)


@router.post("/verify-email", response_model=UserRead)
def verify_email(body: VerifyEmailRequest, users: UserRepository = Depends(get_user_repository)):
    user = verify_code(users, body.email, body.code)
    return UserRead.model_validate(user)


@router.post("/request-verification")
def request_verification(
    body: RequestVerificationRequest,
    background_tasks: BackgroundTasks,
    users: UserRepository = Depends(get_user_repository),
    notifier: Notifier = Depends(get_notifier),
):
    request_verification_code(users, notifier, body.email, background_tasks)
    return {"message": "Verification code sent"}
