from pydantic import BaseModel


class TokenData(BaseModel):
    """
    Identity decoded from a bearer token.

    Attached to the request by the authentication gate and used by the
    business logic to scope reads and writes to the caller.

    :cvar str id: Subject of the token (profile id or email).
    :cvar str email: Email of the caller.
    """

    id: str
    email: str


class AccessToken(BaseModel):
    """
    Issued access token.

    :cvar str token: Signed JWT.
    """

    token: str
