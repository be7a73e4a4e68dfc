"""Author model."""
from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.database import Base
from catalog.models.mixins import TimestampMixin


class Author(TimestampMixin, Base):
    """Author of one or more books."""

    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    bio: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)

    def __repr__(self) -> str:
        return f"<Author(id={self.id}, name={self.name})>"
