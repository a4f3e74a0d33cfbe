from review_api.db.model.base import Base
from review_api.db.model.movie import Movie, SeenMovie
from review_api.db.model.user import Address, User

__all__ = ["Address", "Base", "Movie", "SeenMovie", "User"]
