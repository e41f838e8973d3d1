# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, HTTPException, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest, LoginResponse
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.list_users import ListUsersUseCase
from ...domain.exceptions import BlogListError
from ...di.container import get_container
from .errors import to_http_exception


router = APIRouter(tags=["users"])


@router.get("", response_model=List[UserResponse])
async def list_users() -> List[UserResponse]:
    """
    List all registered users

    Returns:
        List of UserResponse objects (never password hashes)
    """
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)
    return await list_users_use_case.execute()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> UserResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        UserResponse with created user information
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    try:
        return await register_use_case.execute(request)
    except BlogListError as exception:
        raise to_http_exception(exception)


@router.post("/login", response_model=LoginResponse)
async def login_user(request: UserLoginRequest) -> LoginResponse:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        LoginResponse with token, user id and username
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    try:
        return await login_use_case.execute(request)
    except BlogListError as exception:
        raise to_http_exception(exception)
