from datetime import UTC, datetime

from sqlalchemy import DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookcorner.database import Base


class Book(Base):
    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)
    # name_key of the current title/author; recomputed on rename
    name_key: Mapped[int] = mapped_column(Integer, unique=True, index=True, nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    author: Mapped[str] = mapped_column(String(300), nullable=False, index=True)
    added_by: Mapped[str] = mapped_column(String(200), nullable=False)
    # Denormalized from reviews; see services.ratings
    average_rating: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    total_reviews: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    loaned_to: Mapped[str | None] = mapped_column(String(200))
    loaned_at: Mapped[datetime | None] = mapped_column(DateTime)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=lambda: datetime.now(UTC), onupdate=lambda: datetime.now(UTC))

    reviews: Mapped[list["Review"]] = relationship(back_populates="book", cascade="all, delete-orphan")

    @property
    def is_loaned(self) -> bool:
        return self.loaned_to is not None
