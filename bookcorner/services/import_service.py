"""Seed the library from parsed catalog rows."""

import logging
from dataclasses import dataclass, field

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bookcorner.config import DEFAULT_ADDED_BY
from bookcorner.models import Book
from bookcorner.services.catalog import name_key
from bookcorner.services.catalog_csv import CatalogRow

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    books_created: int = 0
    books_skipped: int = 0
    errors: list[str] = field(default_factory=list)


async def import_catalog_rows(
    session: AsyncSession,
    rows: list[CatalogRow],
    default_added_by: str = DEFAULT_ADDED_BY,
) -> ImportResult:
    """Create a book per row. Bad rows are reported and the rest still import."""
    result = ImportResult()

    for row in rows:
        if not row.title or not row.author:
            message = f"line {row.line}: title and author are required"
            logger.warning("Catalog import rejected %s", message)
            result.errors.append(message)
            continue

        key = name_key(row.title, row.author)
        existing = await session.execute(select(Book.id).where(Book.name_key == key))
        if existing.first() is not None:
            result.books_skipped += 1
            continue

        session.add(Book(
            name_key=key,
            title=row.title,
            author=row.author,
            added_by=row.added_by or default_added_by,
            average_rating=0.0,
            total_reviews=0,
        ))
        await session.flush()
        result.books_created += 1

    await session.commit()
    logger.info(
        "Catalog import: %d created, %d skipped, %d rejected",
        result.books_created, result.books_skipped, len(result.errors),
    )
    return result
