"""Authentication use cases."""

from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase
from .login import LoginRequest, LoginUseCase
from .refresh import RefreshField, UserInformationRefresher, refresh_user_information
from .register import RegisterRequest, RegisterUseCase
from .view import UserView

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginUseCase",
    "RefreshField",
    "RegisterRequest",
    "RegisterUseCase",
    "UserInformationRefresher",
    "UserView",
    "refresh_user_information",
]
