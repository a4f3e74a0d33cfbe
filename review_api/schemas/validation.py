from pydantic import BaseModel


class FieldError(BaseModel):
    """
    Field-level validation error.

    :cvar str | None field: Name of the invalid field, None for request-wide errors.
    :cvar str message: Human-readable description.
    """

    field: str | None = None
    message: str
