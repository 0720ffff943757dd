from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from bookcorner.schemas.review import FirstReview, ReviewResponse


class BookCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=500)
    author: str = Field(min_length=1, max_length=300)
    added_by: str = Field(min_length=1, max_length=200)
    review: FirstReview | None = None


class BookUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(None, min_length=1, max_length=500)
    author: str | None = Field(None, min_length=1, max_length=300)


class BookResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str
    added_by: str
    average_rating: float
    total_reviews: int
    loaned_to: str | None
    loaned_at: datetime | None
    created_at: datetime
    updated_at: datetime


class BookDetail(BookResponse):
    is_favorite: bool = False
    reviews: list[ReviewResponse] = []


class AuthorBooks(BaseModel):
    author: str
    is_favorite: bool
    books: list[BookResponse]


class LibraryStats(BaseModel):
    total_books: int
    total_authors: int
    total_reviews: int
    loaned_books: int


class LoanRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    loaned_to: str = Field(min_length=1, max_length=200)


class ImportResponse(BaseModel):
    books_created: int
    books_skipped: int
    errors: list[str]
