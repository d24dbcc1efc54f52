"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from reef.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
    UserView,
)
from reef.interface.api.errors import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/auth",
    tags=["authentication"],
    route_class=DishkaRoute,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.post(
    "/register",
    response_model=UserView,
    responses={409: {"model": ErrorResponse}},
)
async def register(
    request: RegisterRequest,
    use_case: FromDishka[RegisterUseCase],
) -> UserView:
    """Register a new account and its Gitlab identity.

    Args:
        request: Username, email, password and display name
        use_case: Register use case from DI

    Returns:
        The new account with its permanent token and OAuth token pair
    """
    view = await use_case.execute(request)
    logger.info(f"Registered account {view.id} ({view.username})")
    return view


@router.post(
    "/login",
    response_model=UserView,
    responses={404: {"model": ErrorResponse}},
)
async def login(
    request: LoginRequest,
    use_case: FromDishka[LoginUseCase],
) -> UserView:
    """Log in with username or email and password.

    Args:
        request: Password and username and/or email
        use_case: Login use case from DI

    Returns:
        The account with its permanent token and a fresh OAuth token pair
    """
    view = await use_case.execute(request)
    logger.info(f"Account {view.id} logged in")
    return view


@router.get("/whoami", response_model=UserView)
async def whoami(
    use_case: FromDishka[GetCurrentUserUseCase],
    private_token: str | None = Header(default=None, alias="PRIVATE-TOKEN"),
) -> UserView:
    """Return the account owning the ``PRIVATE-TOKEN`` header."""
    return await use_case.execute(GetCurrentUserRequest(token=private_token or ""))
