from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bookcorner.database import get_session
from bookcorner.models import WishlistItem
from bookcorner.routers.books import LETTER_PATTERN
from bookcorner.schemas.wishlist import (
    AuthorWishlist,
    WishlistCreate,
    WishlistResponse,
    WishlistUpdate,
)
from bookcorner.services.catalog import author_id, filter_by_author, group_by_author, name_key, sort_by_author
from bookcorner.services.favorites import favorite_ids, only_favorites

router = APIRouter(prefix="/api/wishlist", tags=["wishlist"])


async def _get_item_or_404(session: AsyncSession, item_id: int) -> WishlistItem:
    item = await session.get(WishlistItem, item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Wishlist item not found")
    return item


async def _find_item(session: AsyncSession, title: str, author: str) -> WishlistItem | None:
    result = await session.execute(select(WishlistItem).where(WishlistItem.name_key == name_key(title, author)))
    return result.scalar_one_or_none()


async def _filtered_items(
    session: AsyncSession,
    q: str | None,
    letter: str | None,
    favorites_only: bool,
) -> list[WishlistItem]:
    items = (await session.execute(select(WishlistItem))).scalars().all()
    selected = filter_by_author(items, query=q, letter=letter)
    if favorites_only:
        selected = only_favorites(selected, await favorite_ids(session))
    return selected


async def _commit_or_409(session: AsyncSession) -> None:
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise HTTPException(status_code=409, detail="Already on the wishlist")


@router.get("", response_model=list[WishlistResponse])
async def list_wishlist(
    q: str | None = Query(None, description="Author prefix (accent and case insensitive)"),
    letter: str | None = Query(None, pattern=LETTER_PATTERN),
    favorites_only: bool = False,
    session: AsyncSession = Depends(get_session),
):
    return sort_by_author(await _filtered_items(session, q, letter, favorites_only))


@router.get("/by-author", response_model=list[AuthorWishlist])
async def list_wishlist_by_author(
    q: str | None = Query(None, description="Author prefix (accent and case insensitive)"),
    letter: str | None = Query(None, pattern=LETTER_PATTERN),
    favorites_only: bool = False,
    session: AsyncSession = Depends(get_session),
):
    items = await _filtered_items(session, q, letter, favorites_only)
    favorites = await favorite_ids(session)
    return [
        AuthorWishlist(
            author=author,
            is_favorite=author_id(author) in favorites,
            items=[WishlistResponse.model_validate(i) for i in group],
        )
        for author, group in group_by_author(items)
    ]


@router.get("/{item_id}", response_model=WishlistResponse)
async def get_wishlist_item(item_id: int, session: AsyncSession = Depends(get_session)):
    return await _get_item_or_404(session, item_id)


@router.post("", response_model=WishlistResponse, status_code=201)
async def add_wishlist_item(data: WishlistCreate, session: AsyncSession = Depends(get_session)):
    if await _find_item(session, data.title, data.author) is not None:
        raise HTTPException(status_code=409, detail="Already on the wishlist")
    item = WishlistItem(name_key=name_key(data.title, data.author), **data.model_dump())
    session.add(item)
    await _commit_or_409(session)
    await session.refresh(item)
    return item


@router.put("/{item_id}", response_model=WishlistResponse)
async def update_wishlist_item(
    item_id: int, data: WishlistUpdate, session: AsyncSession = Depends(get_session)
):
    item = await _get_item_or_404(session, item_id)
    for key, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(item, key, value)

    new_key = name_key(item.title, item.author)
    if new_key != item.name_key:
        if await _find_item(session, item.title, item.author) is not None:
            raise HTTPException(status_code=409, detail="Already on the wishlist")
        item.name_key = new_key
    await _commit_or_409(session)
    await session.refresh(item)
    return item


@router.delete("/{item_id}", status_code=204)
async def delete_wishlist_item(item_id: int, session: AsyncSession = Depends(get_session)):
    item = await _get_item_or_404(session, item_id)
    await session.delete(item)
    await session.commit()
