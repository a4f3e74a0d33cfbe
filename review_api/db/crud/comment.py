from pymongo.asynchronous.database import AsyncDatabase

from review_api.db.documents import COMMENTS
from review_api.schemas.documents import CommentDocument


async def get_comments_by_movie(docs: AsyncDatabase, movie_id: int) -> list[CommentDocument]:
    raws = await docs[COMMENTS].find({"movie_id": movie_id}).to_list(length=None)
    return [CommentDocument.from_raw(raw) for raw in raws]


async def add_comment(docs: AsyncDatabase, comment: CommentDocument) -> CommentDocument:
    result = await docs[COMMENTS].insert_one(comment.to_raw())
    return comment.model_copy(update={"id": str(result.inserted_id)})
