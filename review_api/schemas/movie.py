from pydantic import BaseModel, ConfigDict


class MovieResponse(BaseModel):
    """
    Movie from the catalog.

    :cvar int movie_id: Movie id.
    :cvar str title: Title.
    :cvar str description: Description.
    :cvar float | None rating: Mean rating, None until the first rating.
    """

    movie_id: int
    title: str
    description: str
    rating: float | None = None

    model_config = ConfigDict(from_attributes=True)
