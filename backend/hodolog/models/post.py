"""Post ORM — the single blog post entity.

Invariants:
    - id is an autoincrement integer primary key, assigned by the database on flush
    - ids grow in creation order (newest-first listing orders by id desc)
    - title and content are non-nullable text with no length limit
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from hodolog.db.base import Base


class Post(Base):
    """Blog post — title/content pair with a store-assigned id."""
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"Post(id={self.id!r}, title={self.title!r})"
