from __future__ import annotations

from datetime import UTC, date, datetime

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from review_api.db.model.base import Base


class User(Base):
    """Login identity of the relational store, keyed by email."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), primary_key=True)
    username: Mapped[str] = mapped_column(String(100), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    creation_date: Mapped[date] = mapped_column(Date, default=lambda: datetime.now(UTC).date(), nullable=False)

    addresses: Mapped[list[Address]] = relationship("Address", back_populates="user")


class Address(Base):
    """Postal address, created together with its user at registration."""

    __tablename__ = "addresses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), ForeignKey("users.email"), nullable=False, index=True)

    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    street: Mapped[str | None] = mapped_column(String(255), nullable=True)

    user: Mapped[User] = relationship("User", back_populates="addresses")
