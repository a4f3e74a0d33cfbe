from fastapi import APIRouter, Request
from starlette import status

from review_api.api.dependencies import get_documents_ann, request_body_ann
from review_api.api.openapi import AUTH_EXCEPTIONS, generate_responses
from review_api.exceptions.auth import InvalidCredentialsException
from review_api.exceptions.request import RequestValidationException
from review_api.exceptions.user import (
    EmailAlreadyRegisteredException,
    LoginException,
    ProfileQueryException,
    SignupException,
    UserNotFoundException,
)
from review_api.schemas.success_msg import SuccessResponse
from review_api.schemas.user import MeResponse, SigninResponse
from review_api.services.auth import (
    get_current_user_ann,
    get_me_service,
    logout_service,
    signin_service,
    signup_service,
)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=SuccessResponse,
    summary="Create a profile",
    responses=generate_responses(
        RequestValidationException,
        EmailAlreadyRegisteredException,
        SignupException,
    ),
)
async def signup(body: request_body_ann, docs: get_documents_ann) -> SuccessResponse:
    """
    Profile registration.

    :param body: Username, email and password.
    :param docs: Document store database.
    :return: Success message.
    :rtype: SuccessResponse
    """
    return await signup_service(body=body, docs=docs)


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=SigninResponse,
    summary="Log a profile in",
    responses=generate_responses(
        RequestValidationException,
        InvalidCredentialsException,
        LoginException,
    ),
)
async def login(body: request_body_ann, docs: get_documents_ann, request: Request) -> SigninResponse:
    """
    Authenticate a profile and return an access token.

    :param body: Email and password.
    :param docs: Document store database.
    :param request: Incoming request, its session keeps the identity.
    :return: Token and profile.
    :rtype: SigninResponse
    """
    return await signin_service(body=body, docs=docs, session=request.session)


@router.get(
    "/logout",
    status_code=status.HTTP_200_OK,
    response_model=SuccessResponse,
    summary="Log out",
)
async def logout(request: Request) -> SuccessResponse:
    return logout_service(session=request.session)


@router.get(
    "/me",
    status_code=status.HTTP_200_OK,
    response_model=MeResponse,
    summary="Get the current profile",
    responses=generate_responses(*AUTH_EXCEPTIONS, UserNotFoundException, ProfileQueryException),
)
async def read_me(current_user: get_current_user_ann, docs: get_documents_ann) -> MeResponse:
    """
    Profile of the caller, without the password.

    :param current_user: Current user.
    :param docs: Document store database.
    :return: Profile.
    :rtype: MeResponse
    """
    return await get_me_service(current_user=current_user, docs=docs)
