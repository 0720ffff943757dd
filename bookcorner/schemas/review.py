from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ReviewCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    reviewer_name: str = Field(min_length=1, max_length=200)
    rating: int | None = Field(None, ge=1, le=5)
    comment: str | None = None

    @field_validator("comment")
    @classmethod
    def blank_comment_to_none(cls, value: str | None) -> str | None:
        return value or None

    @model_validator(mode="after")
    def require_rating_or_comment(self):
        if self.rating is None and self.comment is None:
            raise ValueError("A review needs a rating or a comment")
        return self


class ReviewUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    reviewer_name: str | None = Field(None, min_length=1, max_length=200)
    rating: int | None = Field(None, ge=1, le=5)
    comment: str | None = None

    @field_validator("comment")
    @classmethod
    def blank_comment_to_none(cls, value: str | None) -> str | None:
        return value or None


class FirstReview(BaseModel):
    """Optional review submitted together with a new book.

    Kept only when it carries a rating or a comment; the reviewer defaults
    to whoever added the book.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    reviewer_name: str | None = Field(None, max_length=200)
    rating: int | None = Field(None, ge=1, le=5)
    comment: str | None = None

    @field_validator("reviewer_name", "comment")
    @classmethod
    def blank_to_none(cls, value: str | None) -> str | None:
        return value or None

    def has_content(self) -> bool:
        return self.rating is not None or self.comment is not None


class ReviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    book_id: int
    reviewer_name: str
    rating: int | None
    comment: str | None
    created_at: datetime
    updated_at: datetime


class ReviewWithBook(ReviewResponse):
    book_title: str
    book_author: str
