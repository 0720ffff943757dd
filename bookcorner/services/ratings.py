"""Keep the denormalized rating aggregate on books in step with their reviews."""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from bookcorner.models import Book, Review

logger = logging.getLogger(__name__)


async def refresh_rating(session: AsyncSession, book: Book) -> Book:
    """Recount a book's reviews and re-average the ratings that are set.

    Runs inside the caller's transaction, after the review mutation has been
    flushed, so the aggregate commits together with it. Unrated reviews count
    towards ``total_reviews`` but not towards the average; a book without
    any rating averages 0.
    """
    await session.flush()
    total, average = (
        await session.execute(
            select(func.count(Review.id), func.avg(Review.rating)).where(Review.book_id == book.id)
        )
    ).one()
    book.total_reviews = total
    book.average_rating = float(average) if average is not None else 0.0
    logger.debug(
        "Book %s rating refreshed: %.2f over %d reviews",
        book.id, book.average_rating, book.total_reviews,
    )
    return book
