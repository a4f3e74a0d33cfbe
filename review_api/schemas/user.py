from pydantic import BaseModel

from review_api.schemas.token import AccessToken


class ProfileResponse(BaseModel):
    """
    Public part of a user profile from the document store.

    :cvar str id: Profile id.
    :cvar str email: Email of the user.
    :cvar str | None username: Display name.
    """

    id: str
    email: str
    username: str | None = None


class SigninResponse(AccessToken):
    """
    Response of /auth/login.

    :cvar str token: Signed JWT.
    :cvar ProfileResponse user: Logged in profile.
    """

    user: ProfileResponse


class MeResponse(BaseModel):
    """
    Response of /auth/me.

    :cvar ProfileResponse user: Current profile.
    """

    user: ProfileResponse


class LoginResponse(AccessToken):
    """
    Response of /users/login.

    :cvar str token: Signed JWT.
    :cvar str username: Name of the logged in user.
    """

    username: str
