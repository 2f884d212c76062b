"""
Quotes API - Quote SQLAlchemy Model
====================================

What:  ORM model for the `quotes` table.
How:   Integer primary key assigned by the database on insert (monotonic,
       AUTOINCREMENT on SQLite so ids of deleted rows are never reused).

Lifecycle:
    1. Created by POST /quotes or by the startup seed
    2. Updated in place by PUT /quotes/{id} (text, optionally author)
    3. Removed by DELETE /quotes/{id}
"""

from sqlalchemy import Integer, String, Text, text as sa_text
from sqlalchemy.orm import Mapped, mapped_column

from quotes_api.database import Base, DEFAULT_AUTHOR


class Quote(Base):
    """A single quote with its author."""

    __tablename__ = "quotes"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    text: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    author: Mapped[str] = mapped_column(
        String,
        nullable=True,
        default=DEFAULT_AUTHOR,
        server_default=sa_text(f"'{DEFAULT_AUTHOR}'"),
    )

    def to_dict(self) -> dict:
        return {"id": self.id, "text": self.text, "author": self.author}

    def __repr__(self) -> str:
        return f"<Quote(id={self.id}, author='{self.author}')>"
