from pydantic import BaseModel

from review_api.schemas.documents import CommentDocument


class CommentsResponse(BaseModel):
    """
    Comments of a movie.

    :cvar list[CommentDocument] comments: Comments in insertion order.
    """

    comments: list[CommentDocument]
