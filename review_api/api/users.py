from fastapi import APIRouter, Request
from starlette import status

from review_api.api.dependencies import get_session_ann, request_body_ann
from review_api.api.openapi import generate_responses
from review_api.exceptions.request import RequestValidationException
from review_api.exceptions.user import (
    IncorrectCredentialsException,
    LoginException,
    RegistrationException,
    UserAlreadyExistsException,
)
from review_api.schemas.success_msg import SuccessResponse
from review_api.schemas.user import LoginResponse
from review_api.services.users import login_user_service, register_user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "/register",
    status_code=status.HTTP_200_OK,
    response_model=SuccessResponse,
    summary="Register a user with an address",
    responses=generate_responses(
        RequestValidationException,
        UserAlreadyExistsException,
        RegistrationException,
    ),
)
async def register(body: request_body_ann, db: get_session_ann) -> SuccessResponse:
    """
    Register a user and their address atomically.

    :param body: Email, username, password, country and optional city and street.
    :param db: Async database session.
    :return: Success message.
    :rtype: SuccessResponse
    """
    return await register_user_service(body=body, db=db)


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=LoginResponse,
    summary="Log a user in",
    responses=generate_responses(
        RequestValidationException,
        IncorrectCredentialsException,
        LoginException,
    ),
)
async def login(body: request_body_ann, db: get_session_ann, request: Request) -> LoginResponse:
    """
    Authenticate a user and return an access token.

    :param body: Email and password.
    :param db: Async database session.
    :param request: Incoming request, its session keeps the identity.
    :return: Token and user name.
    :rtype: LoginResponse
    """
    return await login_user_service(body=body, db=db, session=request.session)
