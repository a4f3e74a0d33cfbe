from fastapi import APIRouter, Depends, Request
from starlette import status

from review_api.api.dependencies import get_session_ann, request_body_ann
from review_api.api.openapi import AUTH_EXCEPTIONS, generate_responses
from review_api.exceptions.auth import WrongPasswordException
from review_api.exceptions.request import RequestValidationException
from review_api.exceptions.user import UserUpdateException
from review_api.schemas.success_msg import SuccessResponse
from review_api.services.auth import get_current_user, get_current_user_ann
from review_api.services.profile import logout_service, update_password_service

router = APIRouter(
    prefix="/profile",
    tags=["profile"],
    dependencies=[Depends(get_current_user)],
    responses=generate_responses(*AUTH_EXCEPTIONS),
)


@router.put(
    "/password",
    status_code=status.HTTP_200_OK,
    response_model=SuccessResponse,
    summary="Change password",
    responses=generate_responses(RequestValidationException, WrongPasswordException, UserUpdateException),
)
async def update_password(
    current_user: get_current_user_ann,
    body: request_body_ann,
    db: get_session_ann,
) -> SuccessResponse:
    """
    Change the password of the current user.

    :param current_user: Current user.
    :param body: oldPassword and newPassword.
    :param db: Async database session.
    :return: Success message.
    :rtype: SuccessResponse
    """
    return await update_password_service(body=body, current_user=current_user, db=db)


@router.post(
    "/logout",
    status_code=status.HTTP_200_OK,
    response_model=SuccessResponse,
    summary="Log out",
)
async def logout(request: Request) -> SuccessResponse:
    return logout_service(session=request.session)
