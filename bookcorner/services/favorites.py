from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bookcorner.models import FavoriteAuthor
from bookcorner.services.catalog import T, author_id


async def favorite_ids(session: AsyncSession) -> set[int]:
    result = await session.execute(select(FavoriteAuthor.id))
    return set(result.scalars().all())


def only_favorites(items: list[T], favorites: set[int]) -> list[T]:
    return [item for item in items if author_id(item.author) in favorites]
