"""SQLAlchemy ORM model for the author table."""
from uuid import UUID

from sqlalchemy import CHAR, String
from sqlalchemy.orm import Mapped, mapped_column

from authorhub.infrastructure.database.connection import Base
from authorhub.infrastructure.database.types import BinaryUUID


class AuthorModel(Base):
    __tablename__ = "author"

    id: Mapped[UUID] = mapped_column(BinaryUUID(), primary_key=True)
    activation_token: Mapped[str | None] = mapped_column(CHAR(32), nullable=True)
    avatar_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(CHAR(97), nullable=False)
    username: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
