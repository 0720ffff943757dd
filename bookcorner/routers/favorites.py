from fastapi import APIRouter, Depends, Response
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bookcorner.database import get_session
from bookcorner.models import FavoriteAuthor
from bookcorner.schemas.favorite import FavoriteCreate, FavoriteResponse, FavoriteStatus
from bookcorner.services.catalog import author_id, author_sort_key

router = APIRouter(prefix="/api/favorites", tags=["favorites"])


@router.get("", response_model=list[str])
async def list_favorites(session: AsyncSession = Depends(get_session)):
    names = (await session.execute(select(FavoriteAuthor.name))).scalars().all()
    return sorted(names, key=author_sort_key)


@router.post("", response_model=FavoriteResponse, status_code=201)
async def add_favorite(
    data: FavoriteCreate, response: Response, session: AsyncSession = Depends(get_session)
):
    """Mark an author as favourite. Adding one twice returns the existing entry."""
    existing = await session.get(FavoriteAuthor, author_id(data.name))
    if existing is not None:
        response.status_code = 200
        return existing
    favorite = FavoriteAuthor(id=author_id(data.name), name=data.name)
    session.add(favorite)
    await session.commit()
    await session.refresh(favorite)
    return favorite


@router.get("/{name:path}", response_model=FavoriteStatus)
async def get_favorite_status(name: str, session: AsyncSession = Depends(get_session)):
    favorite = await session.get(FavoriteAuthor, author_id(name))
    return FavoriteStatus(name=name, is_favorite=favorite is not None)


@router.delete("/{name:path}", status_code=204)
async def remove_favorite(name: str, session: AsyncSession = Depends(get_session)):
    favorite = await session.get(FavoriteAuthor, author_id(name))
    if favorite is not None:
        await session.delete(favorite)
        await session.commit()
