from datetime import UTC, datetime, timedelta
from typing import Any
import uuid

import jwt
from jwt import ExpiredSignatureError, InvalidTokenError

from review_api.core.config import settings
from review_api.exceptions.auth import (
    AuthenticationFailedException,
    ExpiredTokenException,
    InvalidTokenException,
    InvalidTokenPayloadException,
)
from review_api.schemas.token import TokenData

SUB = "sub"
EMAIL = "email"
EXP = "exp"
IAT = "iat"
JTI = "jti"


def _create_jwt_token_with_expire(payload: dict[str, Any], expires_delta: timedelta | None = None) -> str:
    """
    Encode a JWT with the given lifetime.

    :param payload: JWT claims.
    :param expires_delta: Lifetime, defaults to ACCESS_TOKEN_EXPIRE_MINUTES.
    :return: Token.
    :rtype: Str
    """
    to_encode = payload.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({EXP: datetime.now(UTC) + expires_delta})
    return jwt.encode(payload=to_encode, key=settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def form_access_token(user_id: str, email: str, expires_delta: timedelta | None = None) -> str:
    """
    Issue an access token.

    :param user_id: Subject of the token, profile id or user email.
    :param email: Email of the user.
    :param expires_delta: Lifetime of the token (optional).
    :return: Access token.
    :rtype: Str
    """
    payload: dict[str, Any] = {
        SUB: str(user_id),
        EMAIL: email,
        JTI: str(uuid.uuid4()),
        IAT: datetime.now(UTC),
    }
    return _create_jwt_token_with_expire(payload=payload, expires_delta=expires_delta)


def get_payload(token: str) -> dict[str, Any]:
    """
    Decode a JWT.

    :param token: JWT.
    :return: Token claims.
    :rtype: Dict
    :raises ExpiredTokenException: If the token has expired.
    :raises InvalidTokenException: If the token is invalid.
    :raises AuthenticationFailedException: On any other decoding failure.
    """
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except ExpiredSignatureError as e:
        raise ExpiredTokenException from e
    except InvalidTokenError as e:
        raise InvalidTokenException from e
    except Exception as e:
        raise AuthenticationFailedException from e


def validate_token(token: str) -> TokenData:
    """
    Validate a JWT and extract the caller identity.

    :param token: JWT.
    :return: Id and email of the caller.
    :rtype: TokenData
    :raises InvalidTokenPayloadException: If the token has no subject or email.
    :raises ExpiredTokenException: If the token has expired.
    :raises InvalidTokenException: If the token is invalid.
    :raises AuthenticationFailedException: On any other decoding failure.
    """
    payload = get_payload(token=token)
    user_id = payload.get(SUB)
    email = payload.get(EMAIL)
    if not isinstance(user_id, str) or not user_id or not isinstance(email, str) or not email:
        raise InvalidTokenPayloadException

    return TokenData(id=user_id, email=email)
