from typing import Annotated
from fastapi import APIRouter, Depends, Response, status

from vocab_app.auth.dependencies import get_current_active_user
from vocab_app.config import get_settings
from vocab_app.models.user import AuthResponse, LoginRequest, User, UserCreate, UserResponse
from vocab_app.routers.deps import get_account_service
from vocab_app.services.accounts import AccountService

router = APIRouter(prefix="/api/auth", tags=["auth"])
settings = get_settings()


def _set_auth_cookie(response: Response, auth: AuthResponse) -> None:
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=auth.token,
        max_age=auth.expires_in,
        path="/",
        httponly=True,
        secure=settings.AUTH_COOKIE_SECURE,
        samesite="lax",
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserCreate,
    response: Response,
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """
    Register a new user account.

    - **email**: Email address (must be unique)
    - **password**: Password (6 characters minimum)
    - **name**: Display name
    """
    auth = await accounts.register(user_data)
    _set_auth_cookie(response, auth)
    return auth


@router.post("/login", response_model=AuthResponse)
async def login(
    login_data: LoginRequest,
    response: Response,
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """
    Authenticate user and return an access token.

    The token is also set as an HTTP-only cookie for browser clients.
    """
    auth = await accounts.login(login_data)
    _set_auth_cookie(response, auth)
    return auth


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(response: Response):
    """
    Clear the auth cookie.

    Bearer tokens stay valid until they expire.
    """
    response.delete_cookie(settings.AUTH_COOKIE_NAME, path="/")
    return None


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    current_user: Annotated[User, Depends(get_current_active_user)],
):
    """Get the current authenticated user's information."""
    return current_user
