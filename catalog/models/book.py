"""Book model."""
from enum import Enum as PyEnum
from typing import Optional

from sqlalchemy import Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, query_expression

from catalog.database import Base
from catalog.models.mixins import TimestampMixin


class Genre(str, PyEnum):
    """Book genre enum."""
    FICTION = "fiction"
    NON_FICTION = "non-fiction"
    MYSTERY = "mystery"
    FANTASY = "fantasy"
    SCIENCE_FICTION = "science fiction"
    BIOGRAPHY = "biography"
    HISTORY = "history"
    ROMANCE = "romance"
    THRILLER = "thriller"
    SELF_HELP = "self-help"
    CHILDREN = "children"
    YOUNG_ADULT = "young adult"
    HORROR = "horror"
    POETRY = "poetry"
    COOKBOOK = "cookbook"
    GRAPHIC_NOVEL = "graphic novel"
    TRAVEL = "travel"
    HEALTH = "health"
    BUSINESS = "business"
    RELIGION = "religion"
    PHILOSOPHY = "philosophy"
    ART = "art"
    MUSIC = "music"
    SPORTS = "sports"
    TECHNOLOGY = "technology"
    EDUCATION = "education"
    PARENTING = "parenting"
    HOME_AND_GARDEN = "home and garden"
    CRAFTS_AND_HOBBIES = "crafts and hobbies"
    COMPUTERS = "computers"
    INTERNET = "internet"
    SCIENCE = "science"
    MATHEMATICS = "mathematics"
    ENGINEERING = "engineering"
    LAW = "law"
    POLITICS = "politics"
    SOCIAL_SCIENCES = "social sciences"


class Book(TimestampMixin, Base):
    """Book in the catalog, owned by one author and one publisher."""

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author_id: Mapped[int] = mapped_column(ForeignKey("authors.id"), nullable=False, index=True)
    publisher_id: Mapped[int] = mapped_column(ForeignKey("publishers.id"), nullable=False, index=True)
    isbn: Mapped[str] = mapped_column(String(20), nullable=False)
    price: Mapped[str] = mapped_column(String(20), nullable=False)
    stock: Mapped[str] = mapped_column(String(10), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    genre: Mapped[Genre] = mapped_column(
        Enum(
            Genre,
            name="genre_book",
            values_callable=lambda enum: [member.value for member in enum],
            validate_strings=True,
            create_constraint=True,
        ),
        nullable=False,
    )

    # Filled by BookRepository's enriched selects, None otherwise
    author_name: Mapped[Optional[str]] = query_expression()
    publisher_name: Mapped[Optional[str]] = query_expression()

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, title={self.title}, genre={self.genre})>"
