from fastapi import APIRouter, Depends
from starlette import status

from review_api.api.dependencies import get_documents_ann, request_body_ann
from review_api.api.openapi import AUTH_EXCEPTIONS, generate_responses
from review_api.exceptions.auth import NotAuthenticatedException
from review_api.exceptions.message import (
    MessageCreationException,
    MessageDeletionException,
    MessageIdRequiredException,
    MessageNotFoundException,
    MessageQueryException,
    MessageUpdateException,
)
from review_api.exceptions.request import RequestValidationException
from review_api.schemas.documents import MessageDocument
from review_api.schemas.success_msg import SuccessResponse
from review_api.services.auth import get_current_user, get_current_user_ann
from review_api.services.messages import (
    add_message_service,
    delete_message_service,
    get_message_service,
    get_messages_service,
    update_message_service,
)

router = APIRouter(
    prefix="/messages",
    tags=["messages"],
    dependencies=[Depends(get_current_user)],
    responses=generate_responses(*AUTH_EXCEPTIONS),
)


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=list[MessageDocument],
    summary="List messages",
    responses=generate_responses(MessageQueryException),
)
async def list_messages(docs: get_documents_ann) -> list[MessageDocument]:
    return await get_messages_service(docs=docs)


@router.get(
    "/{message_id}",
    status_code=status.HTTP_200_OK,
    response_model=MessageDocument,
    summary="Get a message",
    responses=generate_responses(MessageNotFoundException, MessageQueryException),
)
async def read_message(message_id: str, docs: get_documents_ann) -> MessageDocument:
    return await get_message_service(message_id=message_id, docs=docs)


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=MessageDocument,
    summary="Write a message",
    responses=generate_responses(RequestValidationException, NotAuthenticatedException, MessageCreationException),
)
async def add_message(current_user: get_current_user_ann, body: request_body_ann, docs: get_documents_ann) -> MessageDocument:
    """
    Write a message authored by the current user.

    :param current_user: Current user.
    :param body: Name and content.
    :param docs: Document store database.
    :return: Created message.
    :rtype: MessageDocument
    """
    return await add_message_service(body=body, current_user=current_user, docs=docs)


@router.put(
    "",
    status_code=status.HTTP_200_OK,
    response_model=MessageDocument,
    include_in_schema=False,
)
@router.put(
    "/{message_id}",
    status_code=status.HTTP_200_OK,
    response_model=MessageDocument,
    summary="Rename a message",
    responses=generate_responses(RequestValidationException, MessageNotFoundException, MessageUpdateException),
)
async def edit_message(body: request_body_ann, docs: get_documents_ann, message_id: str | None = None) -> MessageDocument:
    """
    Change the name of a message.

    :param body: New name.
    :param docs: Document store database.
    :param message_id: Message id.
    :return: Updated message.
    :rtype: MessageDocument
    """
    return await update_message_service(message_id=message_id, body=body, docs=docs)


@router.delete(
    "",
    status_code=status.HTTP_200_OK,
    response_model=SuccessResponse,
    include_in_schema=False,
)
@router.delete(
    "/{message_id}",
    status_code=status.HTTP_200_OK,
    response_model=SuccessResponse,
    summary="Delete a message",
    responses=generate_responses(MessageIdRequiredException, MessageNotFoundException, MessageDeletionException),
)
async def remove_message(docs: get_documents_ann, message_id: str | None = None) -> SuccessResponse:
    return await delete_message_service(message_id=message_id, docs=docs)
