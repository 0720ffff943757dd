from datetime import UTC, datetime

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bookcorner.database import get_session
from bookcorner.models import Book
from bookcorner.routers.books import get_book_or_404
from bookcorner.schemas.book import BookResponse, LoanRequest

router = APIRouter(tags=["loans"])


@router.get("/api/loans", response_model=list[BookResponse])
async def list_loans(session: AsyncSession = Depends(get_session)):
    result = await session.execute(
        select(Book).where(Book.loaned_to.is_not(None)).order_by(Book.loaned_at, Book.title)
    )
    return result.scalars().all()


@router.post("/api/books/{book_id}/loan", response_model=BookResponse)
async def loan_book(
    book_id: int, data: LoanRequest, session: AsyncSession = Depends(get_session)
):
    book = await get_book_or_404(session, book_id)
    if book.is_loaned:
        raise HTTPException(status_code=409, detail=f"Book already loaned to {book.loaned_to}")
    book.loaned_to = data.loaned_to
    book.loaned_at = datetime.now(UTC)
    await session.commit()
    await session.refresh(book)
    return book


@router.post("/api/books/{book_id}/return", response_model=BookResponse)
async def return_book(book_id: int, session: AsyncSession = Depends(get_session)):
    book = await get_book_or_404(session, book_id)
    if not book.is_loaned:
        raise HTTPException(status_code=409, detail="Book is not on loan")
    book.loaned_to = None
    book.loaned_at = None
    await session.commit()
    await session.refresh(book)
    return book
