"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, EmailStr, Field

from folio.application.usecase.auth import (
    AuthResponse,
    ChangePasswordRequest,
    ChangePasswordUseCase,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from folio.application.usecase.common import ApiModel, SuccessResponse
from folio.interface.api.auth import require_user

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for creating an account."""

    username: str = Field(min_length=3, max_length=30)
    email: EmailStr
    name: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1)


class LoginAPIRequest(BaseModel):
    """API request for signing in with an email address or a username."""

    identifier: str | None = None
    email: str | None = None
    username: str | None = None
    password: str

    @property
    def login_identifier(self) -> str:
        return self.identifier or self.email or self.username or ""


class UpdateProfileAPIRequest(ApiModel):
    """API request for editing the signed-in user's profile."""

    username: str | None = None
    email: EmailStr | None = None
    name: str | None = None
    bio: str | None = Field(default=None, max_length=500)


class ChangePasswordAPIRequest(ApiModel):
    """API request for changing the password."""

    current_password: str
    new_password: str


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> AuthResponse:
    """Create an account and sign it in.

    Args:
        request: Registration data
        register_use_case: Register use case from DI

    Returns:
        Token and the new user's profile

    Raises:
        ValidationError: If the username, email or password is invalid
        ConflictError: If the username or email is taken
    """
    return await register_use_case.execute(
        RegisterRequest(
            username=request.username,
            email=str(request.email),
            name=request.name,
            password=request.password,
        )
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthResponse:
    """Sign in with email or username.

    Blocked accounts get 403 with a ``type`` discriminator and no token.
    """
    return await login_use_case.execute(
        LoginRequest(identifier=request.login_identifier, password=request.password)
    )


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> GetCurrentUserResponse:
    """Get the signed-in user."""
    return await require_user(authorization, get_current_user_use_case)


@router.put("/profile", response_model=UpdateProfileResponse)
async def update_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> UpdateProfileResponse:
    """Update the signed-in user's profile.

    A fresh token is returned when the username changes, since tokens
    carry the username.
    """
    user = await require_user(authorization, get_current_user_use_case)
    return await update_profile_use_case.execute(
        UpdateProfileRequest(
            user_id=user.id,
            username=request.username,
            email=str(request.email) if request.email else None,
            name=request.name,
            bio=request.bio,
        )
    )


@router.put("/password", response_model=SuccessResponse)
async def change_password(
    request: ChangePasswordAPIRequest,
    change_password_use_case: FromDishka[ChangePasswordUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> SuccessResponse:
    """Change the password; the current password must match."""
    user = await require_user(authorization, get_current_user_use_case)
    return await change_password_use_case.execute(
        ChangePasswordRequest(
            user_id=user.id,
            current_password=request.current_password,
            new_password=request.new_password,
        )
    )
