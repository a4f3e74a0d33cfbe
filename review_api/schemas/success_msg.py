from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """
    Response with a message about a successful operation.

    :cvar str msg: Success message.
    """

    msg: str


class HealthResponse(BaseModel):
    """
    Liveness probe payload.

    :cvar str message: Fixed status line.
    """

    message: str
