"""
Blog Backend: Post SQLAlchemy Model
=====================================

What:  ORM model representing the `posts` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Used by PostService for reads and inserts.

Table Layout:
    - id:          bigint identity primary key, assigned by the database
    - title:       text, NOT NULL
    - content:     text, NOT NULL
    - created_at:  timestamptz, NOT NULL, defaults to the current UTC time

The NOT NULL constraints are the only rules applied to a post. Nothing in
the application checks titles or content before they reach the table.
"""

from datetime import datetime, timezone

from sqlalchemy import TIMESTAMP, BigInteger, Identity, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from blog_backend.database import Base


class Post(Base):
    """
    A single blog post.

    Lifecycle:
        Created by POST /api/posts, read by the list and detail routes.
        Never updated or deleted.
    """

    __tablename__ = "posts"

    # SQLite only autoincrements INTEGER PRIMARY KEY, so the test database
    # gets an Integer column; PostgreSQL gets BIGINT GENERATED BY DEFAULT AS IDENTITY.
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        Identity(always=False),
        primary_key=True,
    )

    title: Mapped[str] = mapped_column(Text, nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, title='{self.title}', created_at='{self.created_at}')>"
