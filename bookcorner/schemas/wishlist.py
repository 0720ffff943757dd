from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class WishlistCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=500)
    author: str = Field(min_length=1, max_length=300)
    added_by: str = Field(min_length=1, max_length=200)


class WishlistUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(None, min_length=1, max_length=500)
    author: str | None = Field(None, min_length=1, max_length=300)


class WishlistResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str
    added_by: str
    created_at: datetime


class AuthorWishlist(BaseModel):
    author: str
    is_favorite: bool
    items: list[WishlistResponse]
