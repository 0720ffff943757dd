from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bookcorner.database import get_session
from bookcorner.models import Book, Review
from bookcorner.routers.books import get_book_or_404
from bookcorner.schemas.review import (
    ReviewCreate,
    ReviewResponse,
    ReviewUpdate,
    ReviewWithBook,
)
from bookcorner.services.ratings import refresh_rating

router = APIRouter(tags=["reviews"])


async def _get_review_or_404(session: AsyncSession, review_id: int) -> Review:
    review = await session.get(Review, review_id)
    if review is None:
        raise HTTPException(status_code=404, detail="Review not found")
    return review


async def _reviewer_taken(
    session: AsyncSession, book_id: int, reviewer_name: str, exclude_id: int | None = None
) -> bool:
    stmt = select(Review.id).where(Review.book_id == book_id, Review.reviewer_name == reviewer_name)
    if exclude_id is not None:
        stmt = stmt.where(Review.id != exclude_id)
    return (await session.execute(stmt)).first() is not None


async def _commit_review(session: AsyncSession, book: Book) -> None:
    """Refresh the book aggregate and commit, mapping a reviewer clash to 409."""
    try:
        await refresh_rating(session, book)
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise HTTPException(status_code=409, detail="This reviewer already reviewed the book")


@router.get("/api/reviews", response_model=list[ReviewWithBook])
async def list_all_reviews(
    min_rating: int | None = Query(None, ge=1, le=5, description="Filter by minimum rating"),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_session),
):
    stmt = select(Review, Book.title, Book.author).join(Book)
    if min_rating is not None:
        stmt = stmt.where(Review.rating >= min_rating)
    stmt = stmt.order_by(Review.updated_at.desc(), Review.id.desc()).offset(offset).limit(limit)
    rows = (await session.execute(stmt)).all()
    return [
        ReviewWithBook(
            **ReviewResponse.model_validate(review).model_dump(),
            book_title=title,
            book_author=author,
        )
        for review, title, author in rows
    ]


@router.get("/api/books/{book_id}/reviews", response_model=list[ReviewResponse])
async def list_reviews(book_id: int, session: AsyncSession = Depends(get_session)):
    await get_book_or_404(session, book_id)
    result = await session.execute(
        select(Review).where(Review.book_id == book_id).order_by(Review.created_at.desc(), Review.id.desc())
    )
    return result.scalars().all()


@router.post("/api/books/{book_id}/reviews", response_model=ReviewResponse, status_code=201)
async def create_review(
    book_id: int, data: ReviewCreate, session: AsyncSession = Depends(get_session)
):
    book = await get_book_or_404(session, book_id)
    if await _reviewer_taken(session, book_id, data.reviewer_name):
        raise HTTPException(status_code=409, detail="This reviewer already reviewed the book")
    review = Review(book_id=book_id, **data.model_dump())
    session.add(review)
    await _commit_review(session, book)
    await session.refresh(review)
    return review


@router.put("/api/reviews/{review_id}", response_model=ReviewResponse)
async def update_review(
    review_id: int, data: ReviewUpdate, session: AsyncSession = Depends(get_session)
):
    review = await _get_review_or_404(session, review_id)
    changes = data.model_dump(exclude_unset=True)
    if changes.get("reviewer_name") is None:
        changes.pop("reviewer_name", None)
    elif await _reviewer_taken(session, review.book_id, changes["reviewer_name"], exclude_id=review.id):
        raise HTTPException(status_code=409, detail="This reviewer already reviewed the book")

    rating = changes.get("rating", review.rating)
    comment = changes.get("comment", review.comment)
    if rating is None and comment is None:
        raise HTTPException(status_code=422, detail="A review needs a rating or a comment")

    book = await get_book_or_404(session, review.book_id)
    for key, value in changes.items():
        setattr(review, key, value)
    await _commit_review(session, book)
    await session.refresh(review)
    return review


@router.delete("/api/reviews/{review_id}", status_code=204)
async def delete_review(review_id: int, session: AsyncSession = Depends(get_session)):
    review = await _get_review_or_404(session, review_id)
    book = await get_book_or_404(session, review.book_id)
    await session.delete(review)
    await refresh_rating(session, book)
    await session.commit()
