from typing import Literal

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bookcorner.database import get_session
from bookcorner.models import Book, WishlistItem
from bookcorner.services.catalog import matching_authors

router = APIRouter(prefix="/api/authors", tags=["authors"])


@router.get("", response_model=list[str])
async def list_authors(
    source: Literal["books", "wishlist", "all"] = "books",
    prefix: str | None = Query(None, description="Author prefix for autocomplete"),
    session: AsyncSession = Depends(get_session),
):
    names: list[str] = []
    if source in ("books", "all"):
        names.extend((await session.execute(select(Book.author).distinct())).scalars().all())
    if source in ("wishlist", "all"):
        names.extend((await session.execute(select(WishlistItem.author).distinct())).scalars().all())
    return matching_authors(names, prefix)
