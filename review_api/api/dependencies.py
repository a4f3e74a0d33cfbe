from json import JSONDecodeError
from typing import Annotated, Any

from fastapi import Depends, Request
from pymongo.asynchronous.database import AsyncDatabase
from sqlalchemy.ext.asyncio import AsyncSession

from review_api.db.documents import get_documents
from review_api.db.session import get_session
from review_api.exceptions.request import InvalidRequestDataException
from review_api.services.validation import normalize_body


async def get_request_body(request: Request) -> dict[str, Any]:
    """
    DI with the normalized JSON body of the request.

    Bodiless requests normalize an empty object.

    :param request: Incoming request.
    :return: Normalized body.
    :rtype: dict[str, Any]
    :raises InvalidRequestDataException: If the body is not a JSON object.
    """
    raw = await request.body()
    try:
        data = await request.json() if raw.strip() else {}
        return normalize_body(data)
    except (JSONDecodeError, UnicodeDecodeError, TypeError) as e:
        raise InvalidRequestDataException(reason=str(e)) from e


get_session_ann = Annotated[AsyncSession, Depends(get_session)]
get_documents_ann = Annotated[AsyncDatabase, Depends(get_documents)]
request_body_ann = Annotated[dict[str, Any], Depends(get_request_body)]
