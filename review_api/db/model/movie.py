from __future__ import annotations

from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from review_api.db.model.base import Base


class Movie(Base):
    """Catalog entry. ``rating`` is the mean of all ratings and stays NULL until the first one."""

    __tablename__ = "movies"

    movie_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(String(1000), nullable=False)
    rating: Mapped[float | None] = mapped_column(Float, nullable=True)


class SeenMovie(Base):
    __tablename__ = "seen_movies"

    email: Mapped[str] = mapped_column(String(255), ForeignKey("users.email"), primary_key=True)
    movie_id: Mapped[int] = mapped_column(Integer, ForeignKey("movies.movie_id", ondelete="CASCADE"), primary_key=True)
